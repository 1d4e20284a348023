"""
Rectangular region selection driven by pointer events.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from pdfsnip.core.geometry import CoordinateSpace, Point, Rect

from .models import SelectionState

logger = logging.getLogger(__name__)

# Drags no larger than this (display units) on either axis are accidental clicks
DEFAULT_MIN_SELECTION_SIZE = 10.0


class SelectionTracker(QObject):
    """
    Turns a press/drag/release sequence into a committed display rectangle.

    State is only changed through ``on_pointer_down``, ``on_pointer_move``,
    ``on_pointer_up`` and ``reset``. ``selection_committed`` fires at most
    once per drag.
    """

    # Signals
    selection_changed = pyqtSignal(object)  # Rect while dragging
    selection_committed = pyqtSignal(object)  # Rect
    selection_cleared = pyqtSignal()

    def __init__(self, min_size: float = DEFAULT_MIN_SELECTION_SIZE, parent=None):
        super().__init__(parent)

        self.min_size = min_size

        self._state = SelectionState.IDLE
        self._origin: Optional[Point] = None
        self._rect: Optional[Rect] = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def rect(self) -> Optional[Rect]:
        """Current rectangle while dragging, or the committed one."""
        return self._rect

    @property
    def committed_rect(self) -> Optional[Rect]:
        if self._state == SelectionState.COMMITTED:
            return self._rect
        return None

    def on_pointer_down(self, point: Point):
        """Start a fresh drag, abandoning any previous selection."""
        self._origin = point
        self._rect = Rect(point.x, point.y, 0.0, 0.0, CoordinateSpace.DISPLAY)
        self._state = SelectionState.DRAGGING
        self.selection_changed.emit(self._rect)

    def on_pointer_move(self, point: Point):
        if self._state != SelectionState.DRAGGING:
            return

        self._rect = Rect.from_points(self._origin, point, CoordinateSpace.DISPLAY)
        self.selection_changed.emit(self._rect)

    def on_pointer_up(self):
        """Finish the drag, committing it only if it is large enough."""
        if self._state != SelectionState.DRAGGING:
            return

        rect = self._rect
        self._origin = None

        if rect.width > self.min_size and rect.height > self.min_size:
            self._state = SelectionState.COMMITTED
            logger.debug("Selection committed: %s", rect.as_tuple())
            self.selection_committed.emit(rect)
            return

        logger.debug("Selection discarded as too small: %s", rect.as_tuple())
        self._state = SelectionState.IDLE
        self._rect = None
        self.selection_cleared.emit()

    def reset(self):
        """Drop any selection, e.g. when the source document changes."""
        had_selection = self._state != SelectionState.IDLE

        self._state = SelectionState.IDLE
        self._origin = None
        self._rect = None

        if had_selection:
            self.selection_cleared.emit()
