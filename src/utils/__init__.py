"""
Utility modules - Shared utilities for the application

This module should NEVER import from other src modules (client, integrations,
services, storage) to maintain the import hierarchy and prevent circular
dependencies.
"""

# ============================================
# CONFIGURATION
# ============================================
from .config import Config, ConfigDefaults, load_config, describe_api_key

# ============================================
# LOGGING
# ============================================
from .logger import configure_logging, setup_logger

__all__ = [
    "Config",
    "ConfigDefaults",
    "load_config",
    "describe_api_key",
    "configure_logging",
    "setup_logger",
]
