"""
Page widget that shows one rendered page and draws the selection box.
"""

from typing import Optional

import fitz
from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QImage, QMouseEvent, QPainter, QPen, QPixmap
from PyQt5.QtWidgets import QLabel

from pdfsnip.core.document import PDFDocumentReader
from pdfsnip.core.geometry import Point, Rect
from pdfsnip.core.selection import SelectionState, SelectionTracker


class PageView(QLabel):
    """
    Displays a page at the display scale and feeds pointer events to a
    :class:`SelectionTracker`.
    """

    def __init__(self, tracker: SelectionTracker, parent=None):
        super().__init__(parent)

        self.tracker = tracker
        self.setCursor(Qt.CrossCursor)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)

        self.tracker.selection_changed.connect(lambda _rect: self.update())
        self.tracker.selection_committed.connect(lambda _rect: self.update())
        self.tracker.selection_cleared.connect(self.update)

    def show_page(self, reader: PDFDocumentReader, page_index: int, scale: float):
        """Render a page pixmap at ``scale`` and resize to fit it."""
        page = reader.get_page(page_index)
        pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
        img = QImage(
            pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888
        )
        # QImage does not own pix.samples
        pixmap = QPixmap.fromImage(img.copy())
        self.setPixmap(pixmap)
        self.setFixedSize(pixmap.size())
        self.update()

    def clear_page(self):
        self.clear()
        self.setFixedSize(0, 0)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton or self.pixmap() is None:
            return super().mousePressEvent(event)
        pos = event.pos()
        self.tracker.on_pointer_down(Point(pos.x(), pos.y()))

    def mouseMoveEvent(self, event: QMouseEvent):
        if event.buttons() & Qt.LeftButton:
            pos = event.pos()
            self.tracker.on_pointer_move(Point(pos.x(), pos.y()))
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(event)
        pos = event.pos()
        self.tracker.on_pointer_move(Point(pos.x(), pos.y()))
        self.tracker.on_pointer_up()

    def paintEvent(self, event):
        super().paintEvent(event)

        rect: Optional[Rect] = self.tracker.rect
        if rect is None or self.tracker.state == SelectionState.IDLE:
            return

        painter = QPainter(self)
        if self.tracker.state == SelectionState.DRAGGING:
            color = QColor(0, 0, 255)
        else:
            color = QColor(255, 0, 0)
        pen = QPen(color, 2, Qt.DashLine)
        fill = QColor(color)
        fill.setAlpha(50)

        painter.setPen(pen)
        painter.setBrush(QBrush(fill))
        painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))
        painter.end()
