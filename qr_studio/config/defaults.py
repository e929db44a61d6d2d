"""Default configuration values for QR Studio."""

from pathlib import Path

from .config import QRStudioConfig

STORAGE_FILENAMES = {"sqlite": "store.db", "json": "store.json"}


def create_default_config(**overrides) -> QRStudioConfig:
    """Create a default configuration with optional overrides.

    When ``data_dir`` is overridden, ``storage_path`` and ``export_dir``
    follow it unless they are overridden too.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        QRStudioConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            data_dir="/tmp/qr",
            storage_backend="json",
        )
    """
    data_dir = overrides.get("data_dir")
    backend = overrides.get("storage_backend", "sqlite")
    if data_dir is not None:
        data_dir = Path(data_dir)
        overrides.setdefault(
            "storage_path", data_dir / STORAGE_FILENAMES.get(backend, "store.db")
        )
        overrides.setdefault("export_dir", data_dir / "exports")
    elif backend == "json":
        overrides.setdefault("storage_path", Path.home() / ".qr_studio" / "store.json")
    return QRStudioConfig(**overrides)
