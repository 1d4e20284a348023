from dataclasses import dataclass


@dataclass(frozen=True)
class ExportArtifact:
    """Bytes ready to be saved, with their MIME type and fixed file name."""

    data: bytes
    mime_type: str
    filename: str
