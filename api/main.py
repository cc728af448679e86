"""
Motion Task Proxy - Main Application
Serves the workspace and task endpoints in front of the Motion API
"""
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
load_dotenv()

from src.utils.logger import setup_logger
from api.exceptions import APIException, api_exception_handler, validation_exception_handler
from api.lifespan import lifespan
from api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from api.routers import tasks, workspaces

logger = setup_logger(__name__)


# ============================================
# APPLICATION SETUP
# ============================================

def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Motion Task Proxy",
        description="Pick a Motion workspace and submit tasks to it",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # In production, set ALLOWED_ORIGINS environment variable (comma-separated)
    allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "*")
    allowed_origins = [origin.strip() for origin in allowed_origins_env.split(",")] if allowed_origins_env != "*" else ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add middleware in reverse order (last added = first executed)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)

    app.include_router(workspaces.router)   # /list-workspaces, /set-default-workspace
    app.include_router(tasks.router)        # /add-task

    return app


app = create_app()
