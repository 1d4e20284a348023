from dataclasses import dataclass

from pdfsnip.core.geometry import Point


@dataclass(frozen=True)
class TextRecord:
    """One span of a page's text layer, anchored at its baseline origin."""

    text: str
    anchor: Point  # document space
