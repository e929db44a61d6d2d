"""Configuration classes for QR Studio."""

from dataclasses import dataclass, field
from pathlib import Path

from qr_studio.exceptions import ConfigurationError

STORAGE_BACKENDS = ("sqlite", "json", "memory")
MAPS_PROVIDERS = ("auto", "google", "apple")


@dataclass(frozen=True)
class QRStudioConfig:
    """Immutable configuration for payload history and export.

    All configuration is frozen (immutable) so a single instance can be
    created at process start and shared by every service.
    """

    # Local state
    data_dir: Path = field(default_factory=lambda: Path.home() / ".qr_studio")
    storage_backend: str = "sqlite"
    storage_path: Path = field(default_factory=lambda: Path.home() / ".qr_studio" / "store.db")
    export_dir: Path = field(default_factory=lambda: Path.home() / ".qr_studio" / "exports")

    # Persisted record keys
    history_key: str = "qr_studio.history"
    favorites_key: str = "qr_studio.favorites"

    # History settings
    max_history_items: int = 50
    dedup_window_seconds: float = 60.0  # Identical payloads within this window are not re-added

    # Opening payloads
    maps_provider: str = "auto"

    def __post_init__(self):
        """Convert string paths to Path objects and validate values."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir))
        if isinstance(self.storage_path, str):
            object.__setattr__(self, "storage_path", Path(self.storage_path))
        if isinstance(self.export_dir, str):
            object.__setattr__(self, "export_dir", Path(self.export_dir))

        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"storage_backend must be one of {STORAGE_BACKENDS}, got {self.storage_backend!r}"
            )
        if self.maps_provider not in MAPS_PROVIDERS:
            raise ConfigurationError(
                f"maps_provider must be one of {MAPS_PROVIDERS}, got {self.maps_provider!r}"
            )
        if self.max_history_items < 1:
            raise ConfigurationError("max_history_items must be at least 1")
        if self.dedup_window_seconds < 0:
            raise ConfigurationError("dedup_window_seconds cannot be negative")
        if self.history_key == self.favorites_key:
            raise ConfigurationError("history_key and favorites_key must differ")
