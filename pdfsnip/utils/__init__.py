"""
Utility functions and helpers.
"""
from .resource_loader import (
    get_app_data_dir,
    get_default_output_dir,
)

from .settings import (
    AppSettings,
    load_settings,
    TEXT_SERVICE_IMAGE,
    TEXT_SERVICE_PATH,
)

__all__ = [
    # Directories
    'get_app_data_dir',
    'get_default_output_dir',

    # Settings
    'AppSettings',
    'load_settings',
    'TEXT_SERVICE_IMAGE',
    'TEXT_SERVICE_PATH',
]
