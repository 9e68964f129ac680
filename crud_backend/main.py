# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import register_error_handlers
from .api.v1 import health_router, user_router
from .core.config import Settings, get_settings
from .di.container import DIContainer
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB, ensures the unique email index and builds the DI
    container. A failed connection propagates and aborts startup.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    connection = MongoConnection.from_settings(settings)

    try:
        await connection.connect()
    except Exception as e:
        logger.critical(f"MongoDB connection error: {e}")
        raise

    container = DIContainer(connection)
    await container.get(UserRepository).ensure_indexes()
    app.state.container = container
    logger.info("Application startup complete")

    yield

    app.state.container = None
    connection.close()
    logger.info("Application shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="User CRUD API",
        version="1.0.0",
        description="Create, read, update and delete user records",
        lifespan=lifespan,
    )
    application.state.settings = settings

    # Only the frontend may call with credentials
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(user_router)

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn"""
    settings = get_settings()
    logger.info(f"Server is listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
