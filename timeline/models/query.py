"""Timeline query filter."""

from dataclasses import dataclass

from .events import EventKind, TimelineEvent

DEFAULT_QUERY_LIMIT = 100


@dataclass
class TimelineQuery:
    """Filter for StateTimeline.query(). Unset fields match everything."""

    start_time: float | None = None  # inclusive
    end_time: float | None = None  # inclusive
    target_name: str | None = None
    event_type: EventKind | None = None
    limit: int = DEFAULT_QUERY_LIMIT

    def matches(self, event: TimelineEvent) -> bool:
        """Check that an event satisfies every supplied predicate."""
        if self.start_time is not None and event.timestamp < self.start_time:
            return False
        if self.end_time is not None and event.timestamp > self.end_time:
            return False
        if self.target_name is not None and event.target_name != self.target_name:
            return False
        if self.event_type is not None and event.kind != self.event_type:
            return False
        return True
