"""
Atomic saving of export artifacts.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from pdfsnip.core.errors import ExportError

from .models import ExportArtifact

logger = logging.getLogger(__name__)


def save_artifact(artifact: ExportArtifact, output_dir: str) -> Path:
    """
    Write an artifact under its fixed file name in ``output_dir``.

    The bytes go to a temp file in the same directory first and are then
    moved into place, so a reader never sees a half-written file. The
    returned path doubles as the "save finished" signal.

    Raises:
        ExportError: If the file could not be written
    """
    output_path = Path(output_dir) / artifact.filename
    temp_path = None

    try:
        os.makedirs(output_dir, exist_ok=True)
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=Path(artifact.filename).suffix, dir=output_dir
        )
        with os.fdopen(temp_fd, "wb") as f:
            f.write(artifact.data)
        shutil.move(temp_path, output_path)
    except OSError as e:
        # Clean up temp file if it exists
        if temp_path and os.path.exists(temp_path):
            os.remove(temp_path)
        raise ExportError(f"Failed to save {output_path}: {e}") from e

    logger.info("Saved %s (%d bytes)", output_path, len(artifact.data))
    return output_path
