"""
Configuration management
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel


# ============================================
# CONFIGURATION DEFAULTS
# ============================================

class ConfigDefaults:
    """Default configuration values as constants"""

    # Motion API defaults
    MOTION_BASE_URL_DEFAULT = "https://api.usemotion.com/v1"
    MOTION_TIMEOUT_DEFAULT = 10.0  # seconds

    # Server defaults
    SERVER_HOST_DEFAULT = "0.0.0.0"
    SERVER_PORT_DEFAULT = 3000

    # Storage defaults
    PREFERENCE_FILE_DEFAULT = "data/defaultWorkspace.json"

    # Terminal client defaults
    PROXY_URL_DEFAULT = "http://localhost:3000"
    CLIENT_TIMEOUT_DEFAULT = 30.0

    # Logging defaults
    LOGGING_LEVEL_INFO = "INFO"

    # Config file defaults
    CONFIG_PATH_DEFAULT = "config/config.yaml"


# Environment variables that override individual settings, as
# (section, key) -> variable name.
ENV_OVERRIDES = {
    ("motion", "api_key"): "MOTION_API_KEY",
    ("motion", "base_url"): "MOTION_BASE_URL",
    ("motion", "timeout"): "MOTION_TIMEOUT",
    ("server", "host"): "HOST",
    ("server", "port"): "PORT",
    ("storage", "preference_file"): "DEFAULT_WORKSPACE_FILE",
    ("client", "proxy_url"): "PROXY_URL",
    ("logging", "level"): "LOG_LEVEL",
    ("logging", "file"): "LOG_FILE",
}


# ============================================
# CONFIGURATION MODELS
# ============================================

class MotionConfig(BaseModel):
    """Motion API configuration"""
    api_key: Optional[str] = None
    base_url: str = ConfigDefaults.MOTION_BASE_URL_DEFAULT
    timeout: float = ConfigDefaults.MOTION_TIMEOUT_DEFAULT


class ServerConfig(BaseModel):
    """Server configuration"""
    host: str = ConfigDefaults.SERVER_HOST_DEFAULT
    port: int = ConfigDefaults.SERVER_PORT_DEFAULT


class StorageConfig(BaseModel):
    """Local preference storage configuration"""
    preference_file: str = ConfigDefaults.PREFERENCE_FILE_DEFAULT


class ClientConfig(BaseModel):
    """Terminal client configuration"""
    proxy_url: str = ConfigDefaults.PROXY_URL_DEFAULT
    timeout: float = ConfigDefaults.CLIENT_TIMEOUT_DEFAULT


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = ConfigDefaults.LOGGING_LEVEL_INFO
    file: Optional[str] = None


class Config(BaseModel):
    """Main configuration"""
    motion: MotionConfig = MotionConfig()
    server: ServerConfig = ServerConfig()
    storage: StorageConfig = StorageConfig()
    client: ClientConfig = ClientConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(config_path: str = ConfigDefaults.CONFIG_PATH_DEFAULT) -> Config:
    """
    Load configuration from an optional YAML file and environment variables.

    The YAML file may reference ``${VAR}`` placeholders. Environment
    variables listed in ENV_OVERRIDES win over the file.
    """
    load_dotenv()

    config_dict: Dict[str, Any] = {}
    path = Path(config_path)
    if path.exists():
        with open(path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

    config_dict = _replace_env_vars(config_dict)
    config_dict = _apply_env_overrides(config_dict)

    return Config(**config_dict)


def _replace_env_vars(obj: Any) -> Any:
    """
    Recursively replace ${VAR} placeholders with environment variables.

    Unset placeholders become None so the model default applies.
    """
    if isinstance(obj, dict):
        replaced = {k: _replace_env_vars(v) for k, v in obj.items()}
        return {k: v for k, v in replaced.items() if v is not None}
    elif isinstance(obj, list):
        return [_replace_env_vars(item) for item in obj]
    elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
        return os.getenv(obj[2:-1]) or None
    return obj


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ENV_OVERRIDES onto the parsed file contents."""
    for (section, key), var_name in ENV_OVERRIDES.items():
        value = os.getenv(var_name)
        if value:
            config_dict.setdefault(section, {})[key] = value
    return config_dict


def describe_api_key(config: Config) -> str:
    """Describe whether the Motion key is set without revealing it."""
    api_key = config.motion.api_key
    return f"Set (length: {len(api_key)})" if api_key else "Not set"
