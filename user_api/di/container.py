# Local application imports
from ..infrastructure.db.mongo_connection import MongoConnection
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connection and collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UserProvider) - depend on repositories
    
    The container is built once at startup from an explicit MongoConnection
    and kept on app.state for the lifetime of the process.
    """
    
    def __init__(self, connection: MongoConnection) -> None:
        super().__init__()
        self.connection = connection
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, self.connection)
        RepositoryProvider.register(self)
        UserProvider.register(self)
    
    def close(self) -> None:
        """Release the database connection"""
        self.connection.close()
