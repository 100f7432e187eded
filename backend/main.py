from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import socket
import sys
import uuid

from api import users
from config.settings import settings
from constants import ServerConfig
from init_db import init_database
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import clear_logging_context, configure_logging, set_logging_context

LOG_FILE = configure_logging(settings.log_level, settings.log_dir)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE or 'console only'}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting User Service...")

    if app.state.init_db:
        init_database()

    if not settings.empty_list_is_error:
        logger.info("GET /users returns an empty list when no users exist")

    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")


def create_app(init_db: bool = True) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        init_db: Create missing tables on startup. Tests that bring their
            own database pass False.
    """
    app = FastAPI(
        title=ServerConfig.SERVICE_NAME,
        description="CRUD service for user records",
        version=ServerConfig.VERSION,
        lifespan=lifespan
    )
    app.state.init_db = init_db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Tag every log line of a request with a short request id."""
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        set_logging_context(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            clear_logging_context()
        response.headers["X-Request-ID"] = request_id
        return response

    register_exception_handlers(app)

    app.include_router(users.router, tags=["users"])

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "ok",
            "service": ServerConfig.SERVICE_NAME,
            "version": ServerConfig.VERSION
        }

    return app


app = create_app()


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    # Check if port is available
    def is_port_in_use(port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((settings.host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.port):
        logger.error(f"Port {settings.port} is already in use!")
        logger.error("   Another instance of User Service may be running.")
        sys.exit(1)

    logger.info(f"Starting User Service on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
