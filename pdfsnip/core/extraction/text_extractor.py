"""
Bounding-box filtering of a page's text layer.
"""

from typing import Iterable, List

from pdfsnip.core.document import TextRecord
from pdfsnip.core.geometry import Rect

from .models import TextResult


def filter_records(records: Iterable[TextRecord], rect: Rect) -> List[TextRecord]:
    """Records whose anchor lies inside ``rect`` (edges included), in order."""
    return [record for record in records if rect.contains(record.anchor)]


def extract_text(records: Iterable[TextRecord], rect: Rect) -> TextResult:
    """
    Join the text of every record anchored inside a document-space rectangle.

    Returns:
        The space-joined text, or ``TextResult.not_found()`` if nothing matched
    """
    matched = filter_records(records, rect)
    if not matched:
        return TextResult.not_found()
    return TextResult(
        text=" ".join(record.text for record in matched), record_count=len(matched)
    )
