from dataclasses import dataclass

NO_TEXT_FOUND = "No text found in the selected area"


@dataclass(frozen=True)
class TextResult:
    """Text enclosed by a selection."""

    text: str
    record_count: int

    @property
    def found(self) -> bool:
        return self.record_count > 0

    @classmethod
    def not_found(cls) -> "TextResult":
        """Sentinel for a selection that contains no text."""
        return cls(text=NO_TEXT_FOUND, record_count=0)


@dataclass(frozen=True)
class ImageResult:
    """Encoded bitmap cropped from a rendered page."""

    data: bytes
    width: int
    height: int
    image_format: str = "JPEG"
