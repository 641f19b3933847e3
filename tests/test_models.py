"""Tests for data models."""

import pytest

from conftest import make_event, make_snapshot
from timeline.models import (
    CompilationData,
    DebuggerSnapshot,
    EventKind,
    HotReloadData,
    SnapshotHistory,
    TimelineEvent,
    TimelineQuery,
    event_from_dict,
    event_to_dict,
    snapshot_from_dict,
    snapshot_to_dict,
)


class TestEventKind:
    """Tests for EventKind enum."""

    def test_values(self):
        """Test the wire values of each kind."""
        assert EventKind.COMPILATION.value == "compilation"
        assert EventKind.DEBUGGER_SNAPSHOT.value == "debugger_snapshot"
        assert EventKind.HOT_RELOAD.value == "hot_reload"

    def test_compares_equal_to_string(self):
        """Test that kinds compare equal to their string values."""
        assert EventKind.HOT_RELOAD == "hot_reload"


class TestPayloads:
    """Tests for payload dataclasses."""

    def test_compilation_defaults(self):
        """Test that compilation errors default to None."""
        data = CompilationData(status="success")
        assert data.errors is None

    def test_snapshot_history_defaults(self):
        """Test SnapshotHistory default lists."""
        history = SnapshotHistory(num_messages=0)
        assert history.recent == []
        assert history.snapshots == []

    def test_create_event(self):
        """Test creating a TimelineEvent."""
        event = TimelineEvent(
            timestamp=1.5,
            kind=EventKind.HOT_RELOAD,
            target_name="app",
            data=HotReloadData(status="skipped"),
        )
        assert event.timestamp == 1.5
        assert event.kind is EventKind.HOT_RELOAD
        assert event.data.status == "skipped"


class TestTimelineQuery:
    """Tests for TimelineQuery."""

    def test_defaults(self):
        """Test that an empty query has no filters and limit 100."""
        query = TimelineQuery()
        assert query.start_time is None
        assert query.end_time is None
        assert query.target_name is None
        assert query.event_type is None
        assert query.limit == 100

    def test_empty_query_matches_everything(self):
        """Test that an empty query matches any event."""
        assert TimelineQuery().matches(make_event(1, kind="hot_reload"))

    def test_matches_bounds_inclusive(self):
        """Test that bounds equal to the timestamp match."""
        event = make_event(5)
        assert TimelineQuery(start_time=5, end_time=5).matches(event)
        assert not TimelineQuery(start_time=6).matches(event)
        assert not TimelineQuery(end_time=4).matches(event)

    def test_matches_target_and_kind(self):
        """Test exact target and kind matching."""
        event = make_event(1, kind="compilation", target_name="app")
        assert TimelineQuery(target_name="app").matches(event)
        assert not TimelineQuery(target_name="App").matches(event)
        assert not TimelineQuery(event_type=EventKind.HOT_RELOAD).matches(event)


class TestSerialization:
    """Tests for wire-shape conversion."""

    def test_compilation_to_dict(self):
        """Test compilation event wire shape."""
        event = make_event(
            10,
            kind="compilation",
            target_name="app",
            data=CompilationData(status="error", errors=["boom"]),
        )
        assert event_to_dict(event) == {
            "timestamp": 10,
            "type": "compilation",
            "targetName": "app",
            "data": {"status": "error", "errors": ["boom"]},
        }

    def test_compilation_without_errors_omits_key(self):
        """Test that errors is omitted when not set."""
        event = make_event(1, kind="compilation")
        assert event_to_dict(event)["data"] == {"status": "success"}

    def test_snapshot_to_dict(self):
        """Test snapshot payload wire shape."""
        snapshot = make_snapshot("app", 7, model={"x": 1})
        assert snapshot_to_dict(snapshot) == {
            "targetName": "app",
            "timestamp": 7,
            "model": {"x": 1},
            "history": {"numMessages": 1, "recent": ["Increment"], "snapshots": []},
            "state": {"paused": False},
            "programType": "application",
        }

    def test_snapshot_without_history(self):
        """Test that a missing history stays null on the wire."""
        snapshot = DebuggerSnapshot(
            target_name="app",
            timestamp=1,
            model=None,
            history=None,
            state=None,
            program_type="worker",
        )
        data = snapshot_to_dict(snapshot)
        assert data["history"] is None
        assert snapshot_from_dict(data) == snapshot

    def test_unknown_payload_passes_through(self):
        """Test that unrecognised payloads are emitted unchanged."""
        event = make_event(1, kind="hot_reload", data={"custom": 1})
        assert event_to_dict(event)["data"] == {"custom": 1}

    def test_from_dict_builds_tagged_payload(self):
        """Test that the payload type follows the type tag."""
        event = event_from_dict(
            {
                "timestamp": 3,
                "type": "hot_reload",
                "targetName": "app",
                "data": {"status": "success"},
            }
        )
        assert event.kind is EventKind.HOT_RELOAD
        assert isinstance(event.data, HotReloadData)

    def test_snapshot_round_trip(self):
        """Test that a snapshot event survives conversion."""
        event = make_event(4, kind="debugger_snapshot", target_name="app")
        restored = event_from_dict(event_to_dict(event))
        assert restored == event
        assert isinstance(restored.data, DebuggerSnapshot)

    def test_from_dict_unknown_type(self):
        """Test that unknown kinds are rejected."""
        with pytest.raises(ValueError, match="Unknown event type"):
            event_from_dict(
                {"timestamp": 1, "type": "deploy", "targetName": "app", "data": {}}
            )

    def test_from_dict_missing_type(self):
        """Test that a missing type is rejected."""
        with pytest.raises(ValueError, match="missing 'type'"):
            event_from_dict({"timestamp": 1, "targetName": "app"})

    def test_from_dict_missing_status(self):
        """Test that a payload without status is rejected."""
        with pytest.raises(ValueError, match="Malformed compilation"):
            event_from_dict(
                {"timestamp": 1, "type": "compilation", "targetName": "app", "data": {}}
            )

    @pytest.mark.parametrize("data", ["oops", [1], 5])
    def test_from_dict_non_object_data(self, data):
        """Test that a non-object payload is rejected."""
        with pytest.raises(ValueError, match="data must be an object"):
            event_from_dict(
                {"timestamp": 1, "type": "hot_reload", "targetName": "app", "data": data}
            )

    def test_from_dict_non_object_history(self):
        """Test that a snapshot history must be an object."""
        with pytest.raises(ValueError, match="history must be an object"):
            event_from_dict(
                {
                    "timestamp": 1,
                    "type": "debugger_snapshot",
                    "targetName": "app",
                    "data": {
                        "targetName": "app",
                        "timestamp": 1,
                        "history": [1],
                        "programType": "application",
                    },
                }
            )

    def test_from_dict_errors_must_be_list(self):
        """Test that a string errors field is not split into characters."""
        with pytest.raises(ValueError, match="errors must be a list"):
            event_from_dict(
                {
                    "timestamp": 1,
                    "type": "compilation",
                    "targetName": "app",
                    "data": {"status": "error", "errors": "boom"},
                }
            )

    def test_from_dict_hides_lookup_error(self):
        """Test that decode errors do not chain the internal KeyError."""
        with pytest.raises(ValueError) as exc_info:
            event_from_dict({"timestamp": 1, "targetName": "app"})

        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__
