"""
User interface components.
"""
from .main_window import MainWindow
from .page_view import PageView

__all__ = ['MainWindow', 'PageView']
