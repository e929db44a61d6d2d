"""Configuration management for QR Studio."""

from .config import MAPS_PROVIDERS, STORAGE_BACKENDS, QRStudioConfig
from .defaults import create_default_config

__all__ = ["QRStudioConfig", "create_default_config", "STORAGE_BACKENDS", "MAPS_PROVIDERS"]
