from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer", connection: MongoConnection) -> None:
        """
        Register the connection, database and collections in the container.
        This is the ONLY place where database handles are registered.
        """
        container.register_singleton(MongoConnection, connection)
        container.register_singleton("database", connection.get_database())
        container.register_singleton("user_collection", connection.get_user_collection())
