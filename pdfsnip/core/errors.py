"""
Typed failures raised by the selection-to-content pipeline.

Every error carries a ``user_message`` that the controller shows as-is;
the exception text itself is for the log.
"""


class PDFSnipError(Exception):
    """Base class for all pipeline failures."""

    user_message = "Something went wrong."

    def __init__(self, message: str = "", user_message: str = ""):
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class InvalidDocumentError(PDFSnipError):
    """The selected file is not a readable PDF document."""

    user_message = "Please upload a valid PDF file."


class TransformError(PDFSnipError, ValueError):
    """A coordinate transform was given a non-positive scale or size."""

    user_message = "Invalid page scale."


class TextExtractionError(PDFSnipError):
    user_message = "Error extracting text from the selected area."


class CropError(PDFSnipError):
    user_message = "Error cropping PDF."


class ExportError(PDFSnipError):
    user_message = "Error saving exported file."


class TextServiceError(PDFSnipError):
    user_message = "Error fetching extracted text."


class ExportInProgressError(PDFSnipError):
    user_message = "An export is already in progress."
