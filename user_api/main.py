# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import user_router, health_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Builds the MongoDB connection and DI container unless one was supplied
    to create_application, and closes it again on shutdown.
    """
    owns_container = getattr(app.state, "container", None) is None
    
    if owns_container:
        settings = get_settings()
        connection = MongoConnection.from_settings(settings)
        app.state.container = DIContainer(connection)
        logger.info(
            f"Connected container to MongoDB database '{settings.mongo_database_name}'"
        )
    
    yield
    
    if owns_container:
        try:
            app.state.container.close()
        except Exception as e:
            logger.error(f"Error closing MongoDB connection: {e}", exc_info=True)
        app.state.container = None
    
    logger.info("Application shutdown complete")


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - Global error handlers
    - API route registration
    
    Args:
        container: Pre-built dependency container; when omitted, one backed
            by MongoDB is created during startup
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title="User Registry API",
        version="1.0.0",
        description="CRUD service for user records backed by MongoDB",
        lifespan=lifespan
    )
    application.state.container = container
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    application.include_router(health_router)
    application.include_router(user_router, prefix="/api/users")
    
    return application


# Create application instance
app = create_application()
