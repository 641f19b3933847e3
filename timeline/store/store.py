"""StateTimeline: bounded circular log of debugger events."""

from typing import Iterator, Protocol

from ..config import DEFAULT_MAX_SIZE
from ..logging_config import get_logger, log_context
from ..models import DebuggerSnapshot, EventKind, TimelineEvent, TimelineQuery

logger = get_logger(__name__)


def _is_number(value: object) -> bool:
    """True for int and float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ITimelineStore(Protocol):
    """Retains the most recent events and answers queries over them."""

    @property
    def max_size(self) -> int:
        ...

    @property
    def size(self) -> int:
        ...

    def append(self, event: TimelineEvent) -> None:
        """Append an event, evicting the oldest one when full."""
        ...

    def query(self, query: TimelineQuery | None = None) -> list[TimelineEvent]:
        """Get matching events, newest first."""
        ...

    def get_snapshot(self, target_name: str) -> DebuggerSnapshot | None:
        """Get the latest retained snapshot for a target."""
        ...

    def clear(self) -> None:
        """Drop all retained events."""
        ...


class StateTimeline:
    """Fixed-capacity ring buffer of TimelineEvents.

    Slots are preallocated; ``_head`` is the next write position and
    ``_size`` the number of valid slots. Only the ``_size`` slots behind
    ``_head`` are ever read.

    No locking is done here. Callers with parallel threads must serialize
    append()/clear() against readers.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise ValueError(f"max_size must be an int, got {max_size!r}")
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")

        self._max_size = max_size
        self._events: list[TimelineEvent | None] = [None] * max_size
        self._head = 0
        self._size = 0
        self._last_timestamp: float | None = None

    @property
    def max_size(self) -> int:
        """Configured capacity."""
        return self._max_size

    @property
    def size(self) -> int:
        """Number of retained events."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def append(self, event: TimelineEvent) -> None:
        """Append an event, evicting the oldest one when full."""
        timestamp = event.timestamp
        if _is_number(timestamp):
            if self._last_timestamp is not None and timestamp < self._last_timestamp:
                logger.debug(
                    "Out-of-order timestamp for %s",
                    event.target_name,
                    extra=log_context(
                        timestamp=timestamp, previous=self._last_timestamp
                    ),
                )
            self._last_timestamp = timestamp

        if self._size == self._max_size:
            evicted = self._events[self._head]
            logger.debug(
                "Evicting oldest event",
                extra=log_context(
                    kind=getattr(evicted, "kind", None),
                    target_name=getattr(evicted, "target_name", None),
                ),
            )

        self._events[self._head] = event
        self._head = (self._head + 1) % self._max_size
        if self._size < self._max_size:
            self._size += 1

    def _newest_first(self) -> Iterator[TimelineEvent]:
        """Iterate retained events from most to least recently appended."""
        for i in range(self._size):
            index = (self._head - 1 - i) % self._max_size
            yield self._events[index]

    def query(self, query: TimelineQuery | None = None) -> list[TimelineEvent]:
        """Get matching events, newest first.

        Stops scanning once ``query.limit`` matches are found, so the result
        holds the newest matches only.
        """
        if query is None:
            query = TimelineQuery()

        results: list[TimelineEvent] = []
        if query.limit < 1:
            return results

        for event in self._newest_first():
            if not query.matches(event):
                continue
            results.append(event)
            if len(results) >= query.limit:
                break

        return results

    def get_snapshot(self, target_name: str) -> DebuggerSnapshot | None:
        """Get the latest retained snapshot for a target, or None."""
        for event in self._newest_first():
            if (
                event.kind == EventKind.DEBUGGER_SNAPSHOT
                and event.target_name == target_name
            ):
                return event.data
        return None

    def clear(self) -> None:
        """Drop all retained events. Capacity is kept."""
        self._events = [None] * self._max_size
        self._head = 0
        self._size = 0
        self._last_timestamp = None
        logger.info("Timeline cleared", extra=log_context(max_size=self._max_size))
