# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the DI container built during startup
    
    Raises:
        RuntimeError: If the application lifespan has not run
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Dependency container is not initialized")
    return container
