"""Tests for history_store module."""

import json

import pytest
from conftest import FakeClock, FlakyKeyValueStore, RecordingShareTarget

from qr_studio.config import create_default_config
from qr_studio.exceptions import ShareError
from qr_studio.models import ContentType
from qr_studio.services.history_store import HistoryStore

HISTORY_KEY = "qr_studio.history"
FAVORITES_KEY = "qr_studio.favorites"


def stored_history(kv_store):
    return json.loads(kv_store.get(HISTORY_KEY))


# ---------------------------------------------------------------------------
# TestAdd
# ---------------------------------------------------------------------------


class TestAdd:
    """Tests for HistoryStore.add."""

    def test_adds_entry_at_head(self, history_store, clock):
        """Should put the newest entry first."""
        history_store.add("first")
        clock.advance(1)
        update = history_store.add("https://example.com")
        assert [e.data for e in update.entries] == ["https://example.com", "first"]
        assert update.changed is True
        assert update.persisted is True

    def test_entry_fields(self, history_store, clock):
        """Should classify the payload and stamp it with the clock."""
        entry = history_store.add("https://github.com/user").entries[0]
        assert entry.type == ContentType.GITHUB
        assert entry.timestamp == clock.now.isoformat()
        assert entry.is_favorite is False
        assert len(entry.id) == 32

    def test_persists_records(self, history_store, kv_store):
        """Should persist records without the favorite flag."""
        history_store.add("hello")
        records = stored_history(kv_store)
        assert len(records) == 1
        assert set(records[0]) == {"id", "data", "type", "timestamp"}
        assert records[0]["type"] == "text"

    def test_duplicate_within_window_skipped(self, history_store, clock, kv_store):
        """Should not re-add the same payload within 60 seconds."""
        history_store.add("https://example.com")
        writes = kv_store.writes
        clock.advance(59)
        update = history_store.add("https://example.com")
        assert update.changed is False
        assert len(update.entries) == 1
        assert kv_store.writes == writes

    def test_duplicate_at_window_edge_added(self, history_store, clock):
        """Should add the payload again once the full window has passed."""
        history_store.add("https://example.com")
        clock.advance(60)
        update = history_store.add("https://example.com")
        assert update.changed is True
        assert len(update.entries) == 2

    def test_duplicate_after_window_added(self, history_store, clock):
        """Should add the payload again after 61 seconds."""
        history_store.add("https://example.com")
        clock.advance(61)
        update = history_store.add("https://example.com")
        assert len(update.entries) == 2
        assert update.entries[0].id != update.entries[1].id

    def test_duplicate_keeps_position(self, history_store, clock):
        """Should leave a recent duplicate where it is."""
        history_store.add("a")
        clock.advance(1)
        history_store.add("b")
        clock.advance(1)
        update = history_store.add("a")
        assert [e.data for e in update.entries] == ["b", "a"]

    def test_different_payload_within_window_added(self, history_store, clock):
        """Should only deduplicate identical payloads."""
        history_store.add("a")
        clock.advance(1)
        assert len(history_store.add("A").entries) == 2

    def test_evicts_oldest_beyond_capacity(self, history_store, clock):
        """Should keep only the 50 most recent entries."""
        for i in range(51):
            history_store.add(f"payload {i}")
            clock.advance(1)
        entries = history_store.list()
        assert len(entries) == 50
        assert entries[0].data == "payload 50"
        assert entries[-1].data == "payload 1"

    def test_custom_capacity(self, kv_store, clock):
        """Should honour a configured capacity."""
        config = create_default_config(storage_backend="memory", max_history_items=2)
        store = HistoryStore(kv_store, config=config, clock=clock)
        for data in ("a", "b", "c"):
            store.add(data)
            clock.advance(1)
        assert [e.data for e in store.list()] == ["c", "b"]

    def test_empty_payload_ignored(self, history_store, kv_store):
        """Should not record empty payloads."""
        update = history_store.add("")
        assert update.changed is False
        assert update.entries == []
        assert kv_store.get(HISTORY_KEY) is None

    def test_write_failure_reported(self, history_store, kv_store):
        """Should report a failed write instead of raising."""
        kv_store.fail_writes = True
        update = history_store.add("hello")
        assert update.persisted is False
        assert [e.data for e in update.entries] == ["hello"]
        kv_store.fail_writes = False
        assert history_store.list() == []


# ---------------------------------------------------------------------------
# TestRemoveAndClear
# ---------------------------------------------------------------------------


class TestRemoveAndClear:
    """Tests for HistoryStore.remove, clear and clear_favorites."""

    def test_remove(self, history_store, clock):
        """Should remove the entry with the id."""
        first = history_store.add("a").entries[0]
        clock.advance(1)
        history_store.add("b")
        update = history_store.remove(first.id)
        assert [e.data for e in update.entries] == ["b"]
        assert history_store.get(first.id) is None

    def test_remove_unknown_id(self, history_store, kv_store):
        """Should not write when the id is unknown."""
        history_store.add("a")
        writes = kv_store.writes
        update = history_store.remove("missing")
        assert update.changed is False
        assert len(update.entries) == 1
        assert kv_store.writes == writes

    def test_clear_keeps_favorites(self, history_store, kv_store):
        """Should empty the history but leave the favorites record alone."""
        entry = history_store.add("a").entries[0]
        history_store.toggle_favorite(entry.id)
        assert history_store.clear() is True
        assert history_store.list() == []
        assert json.loads(kv_store.get(FAVORITES_KEY)) == [entry.id]

    def test_clear_favorites_keeps_history(self, history_store):
        """Should unmark every favorite without removing entries."""
        entry = history_store.add("a").entries[0]
        history_store.toggle_favorite(entry.id)
        assert history_store.clear_favorites() is True
        assert history_store.is_favorite(entry.id) is False
        assert len(history_store.list()) == 1

    def test_clear_write_failure(self, history_store, kv_store):
        """Should return False when the cleared history cannot be written."""
        history_store.add("a")
        kv_store.fail_writes = True
        assert history_store.clear() is False


# ---------------------------------------------------------------------------
# TestFavorites
# ---------------------------------------------------------------------------


class TestFavorites:
    """Tests for HistoryStore.toggle_favorite."""

    def test_toggle_on_and_off(self, history_store):
        """Should flip membership on each call."""
        entry = history_store.add("a").entries[0]
        assert history_store.toggle_favorite(entry.id).is_favorite is True
        assert history_store.get(entry.id).is_favorite is True
        assert history_store.toggle_favorite(entry.id).is_favorite is False
        assert history_store.get(entry.id).is_favorite is False

    def test_toggle_does_not_touch_history(self, history_store, kv_store, clock):
        """Should not rewrite or reorder the history."""
        history_store.add("a")
        clock.advance(1)
        entry = history_store.add("b").entries[0]
        before = kv_store.get(HISTORY_KEY)
        history_store.toggle_favorite(entry.id)
        assert kv_store.get(HISTORY_KEY) == before

    def test_favorite_survives_clear_and_readd(self, history_store, clock):
        """Should keep the favorites set independent of the history."""
        entry = history_store.add("a").entries[0]
        history_store.toggle_favorite(entry.id)
        history_store.clear()
        assert history_store.is_favorite(entry.id) is True
        clock.advance(1)
        readded = history_store.add("a").entries[0]
        assert readded.id != entry.id
        assert readded.is_favorite is False

    def test_toggle_unknown_id(self, history_store):
        """Should accept ids that are not in the history."""
        update = history_store.toggle_favorite("ghost")
        assert update.is_favorite is True
        assert history_store.list() == []

    def test_toggle_write_failure(self, history_store, kv_store):
        """Should report a failed favorites write."""
        entry = history_store.add("a").entries[0]
        kv_store.fail_writes = True
        update = history_store.toggle_favorite(entry.id)
        assert update.persisted is False
        kv_store.fail_writes = False
        assert history_store.is_favorite(entry.id) is False

    def test_duplicate_ids_in_record_collapsed(self, kv_store, test_config, clock):
        """Should treat the favorites record as a set."""
        kv_store.set(FAVORITES_KEY, json.dumps(["x", "x", 3]))
        store = HistoryStore(kv_store, config=test_config, clock=clock)
        assert store.toggle_favorite("x").is_favorite is False
        assert json.loads(kv_store.get(FAVORITES_KEY)) == []


# ---------------------------------------------------------------------------
# TestQueries
# ---------------------------------------------------------------------------


@pytest.fixture
def populated(history_store, clock):
    """History with one entry of several types, newest last in this list."""
    for data in (
        "https://example.com",
        "https://www.youtube.com/watch?v=abc",
        "WIFI:T:WPA;S:Home;P:pw;;",
        "Grocery list",
        "mailto:someone@example.com",
    ):
        history_store.add(data)
        clock.advance(5)
    return history_store


class TestQueries:
    """Tests for search, filter_by_type and stats."""

    def test_list_order(self, populated):
        """Should list most recent first."""
        assert populated.list()[0].data == "mailto:someone@example.com"
        assert populated.list()[-1].data == "https://example.com"

    def test_search_data_case_insensitive(self, populated):
        """Should match payload text regardless of case."""
        assert [e.data for e in populated.search("GROCERY")] == ["Grocery list"]

    def test_search_type_tag(self, populated):
        """Should match the type tag."""
        assert [e.type for e in populated.search("youtube")] == [ContentType.YOUTUBE]
        assert [e.type for e in populated.search("wifi")] == [ContentType.WIFI]

    def test_blank_search_returns_all(self, populated):
        """Should return everything for a blank query."""
        assert len(populated.search("  ")) == 5

    def test_search_no_match(self, populated):
        """Should return an empty list when nothing matches."""
        assert populated.search("zzz") == []

    def test_filter_by_type(self, populated):
        """Should keep only entries of the given type."""
        assert [e.data for e in populated.filter_by_type(ContentType.URL)] == [
            "https://example.com"
        ]
        assert len(populated.filter_by_type("email")) == 1

    def test_filter_all(self, populated):
        """Should keep everything for 'all'."""
        assert len(populated.filter_by_type("all")) == 5
        assert len(populated.filter_by_type(None)) == 5

    def test_filter_unknown_tag(self, populated):
        """Should return nothing for unknown tags."""
        assert populated.filter_by_type("barcode") == []

    def test_search_then_filter(self, populated):
        """Should compose over a given entry list."""
        entries = populated.search("https")
        assert len(populated.filter_by_type("youtube", entries)) == 1

    def test_stats(self, populated):
        """Should count entries, favorites and types."""
        newest = populated.list()[0]
        populated.toggle_favorite(newest.id)
        stats = populated.stats()
        assert stats.total == 5
        assert stats.favorites == 1
        assert stats.by_type == {"url": 1, "youtube": 1, "wifi": 1, "text": 1, "email": 1}
        assert stats.last_generated == newest.timestamp

    def test_stats_ignore_orphan_favorites(self, history_store):
        """Should only count favorites that match an entry."""
        history_store.add("a")
        history_store.toggle_favorite("ghost")
        assert history_store.stats().favorites == 0

    def test_stats_empty(self, history_store):
        """Should report zeros for an empty history."""
        stats = history_store.stats()
        assert stats.total == 0
        assert stats.by_type == {}
        assert stats.last_generated is None


# ---------------------------------------------------------------------------
# TestReadResilience
# ---------------------------------------------------------------------------


class TestReadResilience:
    """Tests for reading missing or corrupt records."""

    def test_missing_record_is_empty(self, history_store):
        """Should treat a missing record as an empty history."""
        assert history_store.list() == []

    def test_corrupt_json_is_empty(self, kv_store, test_config):
        """Should treat unparseable JSON as an empty history."""
        kv_store.set(HISTORY_KEY, "{not json")
        assert HistoryStore(kv_store, config=test_config).list() == []

    def test_non_list_is_empty(self, kv_store, test_config):
        """Should treat a non-array record as an empty history."""
        kv_store.set(HISTORY_KEY, json.dumps({"id": "x"}))
        assert HistoryStore(kv_store, config=test_config).list() == []

    def test_read_failure_is_empty(self, history_store, kv_store):
        """Should treat a failing read as an empty history."""
        history_store.add("a")
        kv_store.fail_reads = True
        assert history_store.list() == []
        assert history_store.is_favorite("anything") is False

    def test_malformed_records_skipped(self, kv_store, test_config):
        """Should skip malformed records and keep the rest."""
        kv_store.set(
            HISTORY_KEY,
            json.dumps(
                [
                    {"id": "1", "data": "hello", "type": "text", "timestamp": "2024-01-01T00:00:00"},
                    {"id": "2", "data": None, "type": "text", "timestamp": "2024-01-01T00:00:00"},
                    "garbage",
                    {"id": "3", "data": "https://example.com", "type": "bogus", "timestamp": "t"},
                ]
            ),
        )
        entries = HistoryStore(kv_store, config=test_config).list()
        assert [e.id for e in entries] == ["1", "3"]
        assert entries[1].type == ContentType.URL

    def test_reads_records_written_by_another_instance(self, kv_store, test_config, clock):
        """Should see state persisted through the same backend."""
        HistoryStore(kv_store, config=test_config, clock=clock).add("shared")
        assert [e.data for e in HistoryStore(kv_store, config=test_config).list()] == ["shared"]


# ---------------------------------------------------------------------------
# TestExport
# ---------------------------------------------------------------------------


class TestExport:
    """Tests for HistoryStore.export."""

    def test_export_document(self, history_store, share_target, clock):
        """Should share a JSON document with every entry."""
        entry = history_store.add("https://example.com").entries[0]
        history_store.toggle_favorite(entry.id)

        result = history_store.export()

        assert result.success is True
        assert result.item_count == 1
        content, options = share_target.shared[0]
        document = json.loads(content)
        assert document["version"] == "1.0"
        assert document["itemCount"] == 1
        assert document["exportDate"] == clock.now.isoformat()
        assert document["items"] == [
            {
                "id": entry.id,
                "data": "https://example.com",
                "type": "url",
                "timestamp": entry.timestamp,
                "isFavorite": True,
            }
        ]
        assert options.mime_type == "application/json"
        assert options.dialog_title == "Export QR History"

    def test_export_filename(self, history_store, share_target, clock):
        """Should name the file after the export time in milliseconds."""
        result = history_store.export()
        expected = f"qr_history_{int(clock.now.timestamp() * 1000)}.json"
        assert result.filename == expected
        assert share_target.shared[0][1].filename == expected

    def test_export_empty_history(self, history_store, share_target):
        """Should export an empty item list."""
        assert history_store.export().success is True
        assert json.loads(share_target.shared[0][0])["items"] == []

    def test_export_does_not_modify_history(self, history_store, kv_store):
        """Should leave the persisted history untouched."""
        history_store.add("a")
        before = kv_store.get(HISTORY_KEY)
        history_store.export()
        assert kv_store.get(HISTORY_KEY) == before

    def test_share_error(self, kv_store, test_config):
        """Should report share failures without raising."""
        target = RecordingShareTarget(error=ShareError("disk full"))
        result = HistoryStore(kv_store, config=test_config, share_target=target).export()
        assert result.success is False
        assert result.error == "disk full"

    def test_unexpected_error(self, kv_store, test_config):
        """Should report unexpected errors without raising."""
        target = RecordingShareTarget(error=RuntimeError("boom"))
        result = HistoryStore(kv_store, config=test_config, share_target=target).export()
        assert result.success is False
        assert "boom" in result.error

    def test_share_not_completed(self, kv_store, test_config):
        """Should report a declined share as a failure."""
        target = RecordingShareTarget(result=False)
        result = HistoryStore(kv_store, config=test_config, share_target=target).export()
        assert result.success is False
        assert result.error == "Share was not completed"

    def test_no_share_target(self):
        """Should fail cleanly without a share target."""
        result = HistoryStore(FlakyKeyValueStore(), clock=FakeClock()).export()
        assert result.success is False
        assert result.error == "No share target configured"
