"""Share target that saves exported content into a directory."""

import logging
from pathlib import Path

from qr_studio.exceptions import ShareError
from qr_studio.models import ShareOptions
from qr_studio.utils.file_utils import atomic_write_text, safe_filename

logger = logging.getLogger(__name__)


class FileShareTarget:
    """Deliver exports by writing them as files in an export directory.

    Files are written atomically: either the complete artifact exists
    under its final name or nothing does.
    """

    def __init__(self, directory: Path):
        """Initialize the share target.

        Args:
            directory: Directory receiving exported files (created on demand)
        """
        self.directory = directory
        self.last_path: Path | None = None

    def share(self, content: str, options: ShareOptions) -> bool:
        """Write the content to ``<directory>/<options.filename>``.

        Raises:
            ShareError: If the file cannot be written
        """
        path = self.directory / safe_filename(options.filename)
        try:
            atomic_write_text(path, content)
        except OSError as e:
            raise ShareError(f"Cannot write {path}: {e}") from e
        self.last_path = path
        logger.info(f"Exported {options.dialog_title or options.filename} to {path}")
        return True
