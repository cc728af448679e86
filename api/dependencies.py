"""
API Dependencies
Provides shared dependencies for FastAPI routers using proper dependency injection
"""
from typing import Optional

from fastapi import Depends

from src.integrations.motion import MotionClient
from src.services import TaskProxyService
from src.storage import DefaultWorkspaceStore
from src.utils.config import Config, load_config
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


# ============================================
# APPLICATION STATE (Singleton Pattern)
# ============================================

class AppState:
    """Application state holder for singleton instances"""
    _config: Optional[Config] = None
    _motion_client: Optional[MotionClient] = None

    @classmethod
    def get_config(cls) -> Config:
        """Get or create config singleton"""
        if cls._config is None:
            cls._config = load_config()
            logger.info("[OK] Configuration loaded")
        return cls._config

    @classmethod
    def get_motion_client(cls) -> MotionClient:
        """Get or create the shared Motion client"""
        if cls._motion_client is None:
            cls._motion_client = MotionClient.from_config(cls.get_config().motion)
            logger.info("[OK] Motion client initialized")
        return cls._motion_client

    @classmethod
    async def close(cls) -> None:
        """Release the Motion client's connections"""
        if cls._motion_client is not None:
            await cls._motion_client.close()
            cls._motion_client = None

    @classmethod
    def reset(cls) -> None:
        """Forget cached singletons (tests and config reloads)"""
        cls._config = None
        cls._motion_client = None


# ============================================
# FASTAPI DEPENDENCIES
# ============================================

def get_config() -> Config:
    """Dependency: application configuration"""
    return AppState.get_config()


def get_motion_client() -> MotionClient:
    """Dependency: shared Motion client"""
    return AppState.get_motion_client()


def get_preference_store(config: Config = Depends(get_config)) -> DefaultWorkspaceStore:
    """Dependency: default workspace preference file"""
    return DefaultWorkspaceStore(config.storage.preference_file)


def get_task_service(
    motion_client: MotionClient = Depends(get_motion_client),
    preference_store: DefaultWorkspaceStore = Depends(get_preference_store)
) -> TaskProxyService:
    """Dependency: request-scoped task proxy service"""
    return TaskProxyService(motion_client, preference_store)
