"""
Per-user directories for exported files.
"""
import os
import sys
from pathlib import Path

APP_NAME = "PDFSnip"


def get_app_data_dir(app_name: str = APP_NAME) -> Path:
    """
    Get the application data directory for storing user data.

    Args:
        app_name: Name of the application

    Returns:
        Path to the app data directory, created if missing
    """
    if os.name == 'nt':
        base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
    elif sys.platform == 'darwin':
        base_dir = os.path.expanduser('~/Library/Application Support')
    else:
        base_dir = os.path.expanduser('~/.local/share')

    app_dir = Path(base_dir) / app_name
    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


def get_default_output_dir(app_name: str = APP_NAME) -> Path:
    """
    Where exported files go unless configured otherwise.

    Prefers the user's Downloads folder, like a browser download would.
    """
    downloads = Path.home() / "Downloads"
    if downloads.is_dir():
        return downloads
    return get_app_data_dir(app_name) / "exports"
