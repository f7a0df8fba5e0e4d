"""Centralized path resolution for both development and PyInstaller builds."""

import sys
from pathlib import Path


def get_app_root() -> Path:
    """
    Get the application root directory.
    - Frozen (PyInstaller): directory containing the executable
    - Development: project root (4 levels up from this file)
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent.parent.parent.parent


def get_data_dir() -> Path:
    """Get the data directory."""
    return get_app_root() / "data"


def get_config_path() -> Path:
    """Get path to config.json."""
    return get_data_dir() / "config" / "config.json"


def get_models_config_path() -> Path:
    """Get path to models.yaml."""
    return get_data_dir() / "config" / "models.yaml"


def get_cache_dir() -> Path:
    """Get the .cache directory holding hint and conversation payloads."""
    cache_dir = get_app_root() / ".cache"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir
