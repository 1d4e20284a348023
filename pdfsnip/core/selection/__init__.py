"""Pointer-driven region selection."""

from .models import SelectionState
from .selection_tracker import DEFAULT_MIN_SELECTION_SIZE, SelectionTracker

__all__ = ["SelectionTracker", "SelectionState", "DEFAULT_MIN_SELECTION_SIZE"]
