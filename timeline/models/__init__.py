"""Core data models for the debugger timeline."""

from .events import (
    CompilationData,
    DebuggerSnapshot,
    EventData,
    EventKind,
    HotReloadData,
    SnapshotHistory,
    TimelineEvent,
)
from .query import DEFAULT_QUERY_LIMIT, TimelineQuery
from .serialization import (
    event_from_dict,
    event_to_dict,
    snapshot_from_dict,
    snapshot_to_dict,
)

__all__ = [
    # Events
    "EventKind",
    "EventData",
    "TimelineEvent",
    "CompilationData",
    "DebuggerSnapshot",
    "SnapshotHistory",
    "HotReloadData",
    # Query
    "TimelineQuery",
    "DEFAULT_QUERY_LIMIT",
    # Serialization
    "event_to_dict",
    "event_from_dict",
    "snapshot_to_dict",
    "snapshot_from_dict",
]
