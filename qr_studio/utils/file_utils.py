"""File system utilities."""

import os
import re
import tempfile
from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The directory path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def atomic_write_text(path: Path, content: str) -> None:
    """Write text to a file so readers never observe a partial file.

    The content goes to a temporary file in the same directory which then
    replaces the target in a single rename.

    Args:
        path: Destination file
        content: Text to write (UTF-8)

    Raises:
        OSError: If the file cannot be written
    """
    ensure_directory(path.parent)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


def safe_filename(filename: str) -> str:
    """Make a filename safe for the file system.

    Args:
        filename: Original filename

    Returns:
        Safe filename with invalid characters removed
    """
    # Remove or replace invalid filename characters
    invalid_chars = '<>:"/\\|?*'
    safe_name = filename
    for char in invalid_chars:
        safe_name = safe_name.replace(char, "_")

    # Remove control characters
    safe_name = re.sub(r"[\x00-\x1f\x7f]", "", safe_name)

    # Handle Windows reserved names
    reserved = {"CON", "PRN", "AUX", "NUL"} | {
        f"{name}{i}" for name in ("COM", "LPT") for i in range(1, 10)
    }
    stem = Path(safe_name).stem.upper()
    if stem in reserved:
        safe_name = f"_{safe_name}"

    # Truncate to 255 bytes (filesystem limit)
    if len(safe_name.encode("utf-8")) > 255:
        ext = Path(safe_name).suffix
        name = Path(safe_name).stem
        while len((name + ext).encode("utf-8")) > 255:
            name = name[:-1]
        safe_name = name + ext

    # Fallback for empty result
    if not safe_name or not safe_name.strip():
        safe_name = "unnamed"

    return safe_name
