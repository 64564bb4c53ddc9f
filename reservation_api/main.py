# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Tuple
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import users_router, register_error_handlers
from .core.config import get_settings
from .di.container import get_container, reset_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (and with it the shared database client) on
    startup and closes it on shutdown.
    """
    get_container()
    logger.info("Application startup complete")

    yield

    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - Error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Reservation API",
        version="1.0.0",
        description="User accounts for the reservation service",
        lifespan=lifespan
    )

    register_error_handlers(application)
    application.include_router(users_router, prefix="/api/v1")

    return application


def parse_listen_addr(listen_addr: str) -> Tuple[str, int]:
    """
    Split a listen address such as ":5001" or "127.0.0.1:8080"

    An empty host means all interfaces.

    Raises:
        ValueError: If the port is missing or not a number
    """
    host, separator, port = listen_addr.rpartition(":")
    if not separator or not port.isdigit():
        raise ValueError(f"Invalid listen address: {listen_addr!r}")
    return host or "0.0.0.0", int(port)


def run() -> None:
    """Console entry point: serve the API on LISTEN_ADDR"""
    host, port = parse_listen_addr(get_settings().listen_addr)
    uvicorn.run("reservation_api.main:app", host=host, port=port)


# Create application instance
app = create_application()
