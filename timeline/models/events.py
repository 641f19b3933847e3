"""Timeline event data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union


class EventKind(str, Enum):
    """Categories of timeline events."""

    COMPILATION = "compilation"
    DEBUGGER_SNAPSHOT = "debugger_snapshot"
    HOT_RELOAD = "hot_reload"


@dataclass
class CompilationData:
    """Result of compiling a target."""

    status: Literal["success", "error"]
    errors: list[str] | None = None


@dataclass
class SnapshotHistory:
    """Summary of the message history attached to a snapshot."""

    num_messages: int
    recent: list[Any] = field(default_factory=list)
    snapshots: list[Any] = field(default_factory=list)


@dataclass
class DebuggerSnapshot:
    """Full debugger state of a target at a point in time."""

    target_name: str
    timestamp: float
    model: Any
    history: SnapshotHistory | None
    state: Any
    program_type: str


@dataclass
class HotReloadData:
    """Outcome of a hot-reload attempt."""

    status: Literal["success", "skipped"]


EventData = Union[CompilationData, DebuggerSnapshot, HotReloadData]


@dataclass
class TimelineEvent:
    """A timestamped, kind-tagged record about one target."""

    timestamp: float  # caller-supplied, wall-clock millis by convention
    kind: EventKind
    target_name: str
    data: EventData  # shape determined by kind
