import logging
import sys

from PyQt5.QtWidgets import QApplication

from pdfsnip.ui import MainWindow
from pdfsnip.utils.settings import load_settings


def main():
    """
    Main function to run the PDFSnip application.
    It checks for a file path passed as a command-line argument.
    """
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)

    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]

    window = MainWindow(settings, file_path)
    window.showMaximized()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
