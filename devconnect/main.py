# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import auth_router, user_router, post_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_client
from .domain.repositories import CommentRepository, PostRepository, UserRepository

logger = logging.getLogger(__name__)


async def ensure_indexes() -> None:
    """Create the unique email index and the listing indexes for every store"""
    container = get_container()
    for repository_type in (UserRepository, PostRepository, CommentRepository):
        await container.get(repository_type).ensure_indexes()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates database indexes on startup and closes the MongoDB client on
    shutdown. An unreachable database does not prevent the app from starting;
    requests will fail with 500 until it is back.
    """
    try:
        await ensure_indexes()
        logger.info("Database indexes ensured")
    except PyMongoError as e:
        logger.error(f"Failed to ensure database indexes: {e}", exc_info=True)

    yield

    close_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Error handlers for the domain error taxonomy
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="DevConnect API",
        version="1.0.0",
        description="Developer social network: accounts, posts, likes and comments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(user_router, prefix="/api/users")
    application.include_router(post_router, prefix="/api/posts")

    @application.get("/api/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
