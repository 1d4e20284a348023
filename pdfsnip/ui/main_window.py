import logging
import os

import pyperclip
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QAction,
    QActionGroup,
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QScrollArea,
    QSplitter,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from pdfsnip.controllers import NO_TEXT_SELECTED, RegionController, SelectionMode
from pdfsnip.core.export.export_worker import EXPORT_IMAGE, EXPORT_PDF
from pdfsnip.core.geometry import Size
from pdfsnip.utils.settings import AppSettings

from .page_view import PageView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings, file_path=None):
        super().__init__()

        self.setWindowTitle("PDFSnip")

        self.controller = RegionController(settings, parent=self)

        self._setup_ui()
        self._connect_signals()
        self._update_actions()

        if file_path:
            self.controller.open_pdf(file_path)

    def _setup_ui(self):
        toolbar = QToolBar("Main", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.open_action = QAction("Open", self)
        self.open_action.setShortcut("Ctrl+O")
        self.prev_action = QAction("Prev Page", self)
        self.next_action = QAction("Next Page", self)
        self.page_label = QLabel("", self)

        self.text_mode_action = QAction("Select Text", self, checkable=True)
        self.crop_mode_action = QAction("Crop Area", self, checkable=True)
        self.text_mode_action.setChecked(True)
        mode_group = QActionGroup(self)
        mode_group.addAction(self.text_mode_action)
        mode_group.addAction(self.crop_mode_action)

        self.export_pdf_action = QAction("Export to PDF (HD)", self)
        self.export_png_action = QAction("Download Image", self)
        self.save_text_action = QAction("Download as Word", self)
        self.copy_text_action = QAction("Copy Text", self)
        self.copy_text_action.setShortcut("Ctrl+C")

        toolbar.addAction(self.open_action)
        toolbar.addSeparator()
        toolbar.addAction(self.prev_action)
        toolbar.addWidget(self.page_label)
        toolbar.addAction(self.next_action)
        toolbar.addSeparator()
        toolbar.addAction(self.text_mode_action)
        toolbar.addAction(self.crop_mode_action)
        toolbar.addSeparator()
        toolbar.addAction(self.export_pdf_action)
        toolbar.addAction(self.export_png_action)
        toolbar.addAction(self.save_text_action)
        toolbar.addAction(self.copy_text_action)

        self.page_view = PageView(self.controller.tracker)
        scroll = QScrollArea(self)
        scroll.setWidget(self.page_view)
        scroll.setAlignment(Qt.AlignCenter)

        side_panel = QWidget(self)
        side_layout = QVBoxLayout(side_panel)
        side_layout.addWidget(QLabel("Extracted Text:", side_panel))
        self.text_output = QPlainTextEdit(side_panel)
        self.text_output.setReadOnly(True)
        self.text_output.setPlaceholderText(NO_TEXT_SELECTED)
        side_layout.addWidget(self.text_output)
        side_layout.addWidget(QLabel("Text Service Response:", side_panel))
        self.service_output = QPlainTextEdit(side_panel)
        self.service_output.setReadOnly(True)
        side_layout.addWidget(self.service_output)

        splitter = QSplitter(Qt.Horizontal, self)
        splitter.addWidget(scroll)
        splitter.addWidget(side_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

    def _connect_signals(self):
        self.open_action.triggered.connect(self.open_pdf)
        self.prev_action.triggered.connect(self.controller.previous_page)
        self.next_action.triggered.connect(self.controller.next_page)
        self.text_mode_action.triggered.connect(
            lambda: self._set_mode(SelectionMode.TEXT)
        )
        self.crop_mode_action.triggered.connect(
            lambda: self._set_mode(SelectionMode.CROP)
        )
        self.export_pdf_action.triggered.connect(
            lambda: self.controller.export_selection(EXPORT_PDF)
        )
        self.export_png_action.triggered.connect(
            lambda: self.controller.export_selection(EXPORT_IMAGE)
        )
        self.save_text_action.triggered.connect(self.controller.save_text)
        self.copy_text_action.triggered.connect(self.copy_extracted_text)

        self.controller.status_changed.connect(self.statusBar().showMessage)
        self.controller.page_changed.connect(self._on_page_changed)
        self.controller.text_extracted.connect(self._on_text_extracted)
        self.controller.export_started.connect(self._update_actions)
        self.controller.export_finished.connect(self._on_export_finished)
        self.controller.service_text_received.connect(
            self.service_output.setPlainText
        )
        self.controller.tracker.selection_committed.connect(
            lambda _rect: self._update_actions()
        )
        self.controller.tracker.selection_cleared.connect(self._update_actions)

    def open_pdf(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open PDF", "", "PDF Files (*.pdf)"
        )
        if not file_path:
            return
        if not self.controller.open_pdf(file_path):
            QMessageBox.warning(self, "Invalid File", self.controller.status)
            return
        self.setWindowTitle(f"PDFSnip - {os.path.basename(file_path)}")
        self.text_output.clear()
        self.service_output.clear()

    def copy_extracted_text(self):
        text = self.text_output.toPlainText()
        if text:
            pyperclip.copy(text)
        else:
            QMessageBox.information(self, "No Selection", NO_TEXT_SELECTED)

    def _set_mode(self, mode: SelectionMode):
        self.controller.set_mode(mode)
        self._update_actions()

    def _on_page_changed(self, page_index: int):
        reader = self.controller.reader
        self.page_view.show_page(
            reader, page_index, self.controller.settings.display_scale
        )
        size = self.page_view.size()
        self.controller.set_container_size(Size(size.width(), size.height()))
        self.page_label.setText(
            f" Page {page_index + 1} of {reader.get_page_count()} "
        )
        self._update_actions()

    def _on_text_extracted(self, text: str):
        self.text_output.setPlainText(text)
        self._update_actions()

    def _on_export_finished(self, success: bool, message: str):
        if not success:
            QMessageBox.warning(self, "Export Failed", message)
        self._update_actions()

    def _update_actions(self):
        controller = self.controller
        loaded = controller.reader.is_loaded()
        page_count = controller.reader.get_page_count()
        crop_mode = controller.mode == SelectionMode.CROP
        can_export = (
            crop_mode
            and controller.tracker.committed_rect is not None
            and not controller.is_exporting
        )
        has_text = controller.last_text is not None and controller.last_text.found

        self.prev_action.setEnabled(loaded and controller.page_index > 0)
        self.next_action.setEnabled(loaded and controller.page_index < page_count - 1)
        self.export_pdf_action.setEnabled(can_export)
        self.export_png_action.setEnabled(can_export)
        self.save_text_action.setEnabled(has_text)
        self.copy_text_action.setEnabled(has_text)
