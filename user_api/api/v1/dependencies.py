# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at startup
    
    Args:
        request: Incoming request (gives access to app.state)
        
    Returns:
        BaseContainer with all user dependencies registered
        
    Raises:
        RuntimeError: If the application lifespan has not set a container
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Dependency container is not initialised")
    return container
