"""
PDFSnip - select a region of a PDF page and extract its text or crop it.
"""

__version__ = "0.1.0"
