"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from qr_studio.config import create_default_config
from qr_studio.exceptions import ClipboardError, LaunchError, StorageError
from qr_studio.presenters import NullPresenter
from qr_studio.services.backends import MemoryKeyValueStore
from qr_studio.services.history_store import HistoryStore


class FakeClock:
    """A controllable clock returning aware UTC datetimes."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class FlakyKeyValueStore(MemoryKeyValueStore):
    """A memory store whose reads and/or writes can be made to fail."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def get(self, key):
        if self.fail_reads:
            raise StorageError("read failed")
        return super().get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise StorageError("write failed")
        self.writes += 1
        super().set(key, value)

    def remove(self, key):
        if self.fail_writes:
            raise StorageError("write failed")
        super().remove(key)


class RecordingShareTarget:
    """A share target that records every delivery."""

    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.shared = []

    def share(self, content, options):
        if self.error is not None:
            raise self.error
        self.shared.append((content, options))
        return self.result


class RecordingClipboard:
    """A clipboard that remembers copied text, optionally failing."""

    def __init__(self, fail=False):
        self.fail = fail
        self.copied = []

    def copy(self, text):
        if self.fail:
            raise ClipboardError("clipboard unavailable")
        self.copied.append(text)


class ScriptedLauncher:
    """A URI launcher with scripted answers."""

    def __init__(self, can_open=True, opens=True, error=False):
        self._can_open = can_open
        self._opens = opens
        self._error = error
        self.opened = []

    def can_open(self, uri):
        return self._can_open

    def open(self, uri):
        if self._error:
            raise LaunchError("launch failed")
        self.opened.append(uri)
        return self._opens


@pytest.fixture
def test_config(tmp_path):
    """Provide a configuration whose paths live in a temporary directory."""
    return create_default_config(data_dir=tmp_path, storage_backend="memory")


@pytest.fixture
def clock():
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def kv_store():
    """Provide a key-value store that can be made to fail."""
    return FlakyKeyValueStore()


@pytest.fixture
def share_target():
    """Provide a share target that records deliveries."""
    return RecordingShareTarget()


@pytest.fixture
def history_store(kv_store, test_config, share_target, clock):
    """Provide a HistoryStore over an in-memory backend and a fake clock."""
    return HistoryStore(kv_store, config=test_config, share_target=share_target, clock=clock)


@pytest.fixture
def clipboard():
    """Provide a recording clipboard."""
    return RecordingClipboard()


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()
