"""
Application lifecycle management
"""
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.utils.config import describe_api_key
from src.utils.logger import configure_logging, setup_logger
from api.dependencies import AppState

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Loads configuration on startup and closes the shared Motion client on
    shutdown.
    """
    config = AppState.get_config()
    configure_logging(config.logging.level, config.logging.file)

    logger.info(f"Server running at http://{config.server.host}:{config.server.port}")
    logger.info(f"API Key: {describe_api_key(config)}")
    logger.info(f"Default workspace file: {config.storage.preference_file}")

    yield

    try:
        await AppState.close()
        logger.info("[OK] Motion client closed")
    except asyncio.CancelledError:
        logger.info("Motion client closure cancelled during shutdown")
    except Exception as e:
        logger.warning(f"Error closing Motion client: {e}")
