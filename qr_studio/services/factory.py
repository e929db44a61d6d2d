"""Factory for creating services from configuration."""

import logging

from qr_studio.config import QRStudioConfig
from qr_studio.interfaces import Clipboard, KeyValueStore, ShareTarget, UriLauncher
from qr_studio.services.action_invoker import ActionInvoker
from qr_studio.services.backends import (
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    SqliteKeyValueStore,
)
from qr_studio.services.desktop import FileShareTarget, QtClipboard, QtUriLauncher
from qr_studio.services.history_store import HistoryStore

logger = logging.getLogger(__name__)


def create_key_value_store(config: QRStudioConfig) -> KeyValueStore:
    """Create the persistence backend selected by the configuration.

    Args:
        config: Application configuration

    Returns:
        A SQLite, JSON-file or in-memory key-value store
    """
    if config.storage_backend == "memory":
        return MemoryKeyValueStore()
    if config.storage_backend == "json":
        return JsonFileKeyValueStore(config.storage_path)
    return SqliteKeyValueStore(config.storage_path)


def create_history_store(
    config: QRStudioConfig,
    store: KeyValueStore | None = None,
    share_target: ShareTarget | None = None,
) -> HistoryStore:
    """Create a HistoryStore wired to the configured backend and export directory.

    Args:
        config: Application configuration
        store: Backend to use instead of the configured one
        share_target: Export destination instead of the export directory

    Returns:
        Configured HistoryStore instance
    """
    if store is None:
        store = create_key_value_store(config)
    if share_target is None:
        share_target = FileShareTarget(config.export_dir)
    logger.debug(f"History store using {type(store).__name__}")
    return HistoryStore(store, config=config, share_target=share_target)


def create_action_invoker(
    config: QRStudioConfig,
    launcher: UriLauncher | None = None,
    clipboard: Clipboard | None = None,
) -> ActionInvoker:
    """Create an ActionInvoker, defaulting to the Qt clipboard and launcher.

    Args:
        config: Application configuration
        launcher: URI launcher instead of the Qt one
        clipboard: Clipboard instead of the Qt one

    Returns:
        Configured ActionInvoker instance
    """
    if launcher is None:
        launcher = QtUriLauncher()
    if clipboard is None:
        clipboard = QtClipboard()
    return ActionInvoker(launcher, clipboard, config=config)
