from enum import Enum


class SelectionState(Enum):
    """Lifecycle of a rectangular pointer selection."""

    IDLE = "idle"
    DRAGGING = "dragging"
    COMMITTED = "committed"
