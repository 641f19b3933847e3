"""Bounded timeline of debugger events."""

from .app import Application, IApplication
from .models import (
    CompilationData,
    DebuggerSnapshot,
    EventKind,
    HotReloadData,
    SnapshotHistory,
    TimelineEvent,
    TimelineQuery,
)
from .recorder import ITimelineRecorder, TimelineRecorder
from .store import ITimelineStore, StateTimeline

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "EventKind",
    "TimelineEvent",
    "TimelineQuery",
    "CompilationData",
    "DebuggerSnapshot",
    "SnapshotHistory",
    "HotReloadData",
    # Components
    "ITimelineStore",
    "StateTimeline",
    "ITimelineRecorder",
    "TimelineRecorder",
]
