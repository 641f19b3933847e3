"""TimelineRecorder: producer-side helper for appending events."""

from datetime import datetime, timezone
from typing import Literal, Protocol

from ..logging_config import get_logger
from ..models import (
    CompilationData,
    DebuggerSnapshot,
    EventData,
    EventKind,
    HotReloadData,
    TimelineEvent,
)
from ..store import ITimelineStore

logger = get_logger(__name__)


def now_millis() -> float:
    """Current UTC wall-clock time in milliseconds."""
    return datetime.now(timezone.utc).timestamp() * 1000


class ITimelineRecorder(Protocol):
    """Creating TimelineEvents on behalf of producers."""

    def record(
        self,
        kind: EventKind,
        target_name: str,
        data: EventData,
        timestamp: float | None = None,
    ) -> TimelineEvent:
        """Create a TimelineEvent and append it to the store."""
        ...


class TimelineRecorder:
    """Stamps events for the compiler, debugger and hot-reload producers."""

    def __init__(self, store: ITimelineStore):
        self._store = store

    def record(
        self,
        kind: EventKind,
        target_name: str,
        data: EventData,
        timestamp: float | None = None,
    ) -> TimelineEvent:
        """Create a TimelineEvent and append it to the store."""
        event = TimelineEvent(
            timestamp=now_millis() if timestamp is None else timestamp,
            kind=kind,
            target_name=target_name,
            data=data,
        )
        self._store.append(event)
        return event

    def record_compilation(
        self,
        target_name: str,
        status: Literal["success", "error"],
        errors: list[str] | None = None,
        timestamp: float | None = None,
    ) -> TimelineEvent:
        """Record a compilation result."""
        if status == "error":
            logger.info(
                "Compilation failed for %s (%d errors)",
                target_name,
                len(errors or []),
            )
        return self.record(
            EventKind.COMPILATION,
            target_name,
            CompilationData(status=status, errors=errors),
            timestamp,
        )

    def record_snapshot(self, snapshot: DebuggerSnapshot) -> TimelineEvent:
        """Record a debugger snapshot, stamped with the snapshot's own time."""
        return self.record(
            EventKind.DEBUGGER_SNAPSHOT,
            snapshot.target_name,
            snapshot,
            snapshot.timestamp,
        )

    def record_hot_reload(
        self,
        target_name: str,
        status: Literal["success", "skipped"],
        timestamp: float | None = None,
    ) -> TimelineEvent:
        """Record a hot-reload outcome."""
        return self.record(
            EventKind.HOT_RELOAD,
            target_name,
            HotReloadData(status=status),
            timestamp,
        )
