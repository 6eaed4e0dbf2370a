"""
Configuration Infrastructure

JSON file-based configuration loader and environment helpers
"""

from .loader import JsonConfigLoader, SystemConfig, load_system_config
from .validator import (
    load_environment,
    get_project_root,
    get_data_dir,
)

__all__ = [
    "JsonConfigLoader",
    "SystemConfig",
    "load_system_config",
    "load_environment",
    "get_project_root",
    "get_data_dir",
]
