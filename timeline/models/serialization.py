"""Conversion between timeline events and their JSON wire shape.

The wire shape keeps camelCase keys so that debugger UIs can consume
query results as-is::

    {"timestamp": 1700000000000, "type": "hot_reload",
     "targetName": "app", "data": {"status": "success"}}
"""

from typing import Any

from .events import (
    CompilationData,
    DebuggerSnapshot,
    EventData,
    EventKind,
    HotReloadData,
    SnapshotHistory,
    TimelineEvent,
)


def snapshot_to_dict(snapshot: DebuggerSnapshot) -> dict[str, Any]:
    """Convert a DebuggerSnapshot to its wire shape."""
    history = None
    if snapshot.history is not None:
        history = {
            "numMessages": snapshot.history.num_messages,
            "recent": snapshot.history.recent,
            "snapshots": snapshot.history.snapshots,
        }
    return {
        "targetName": snapshot.target_name,
        "timestamp": snapshot.timestamp,
        "model": snapshot.model,
        "history": history,
        "state": snapshot.state,
        "programType": snapshot.program_type,
    }


def snapshot_from_dict(data: dict[str, Any]) -> DebuggerSnapshot:
    """Build a DebuggerSnapshot from its wire shape.

    Raises:
        ValueError: If the snapshot or its history is not an object, or a
            required field is missing.
    """
    if not isinstance(data, dict):
        raise ValueError("Snapshot data must be an object")

    history = None
    try:
        if data.get("history") is not None:
            raw = data["history"]
            if not isinstance(raw, dict):
                raise ValueError("Snapshot history must be an object")
            history = SnapshotHistory(
                num_messages=raw["numMessages"],
                recent=list(raw.get("recent") or []),
                snapshots=list(raw.get("snapshots") or []),
            )
        return DebuggerSnapshot(
            target_name=data["targetName"],
            timestamp=data["timestamp"],
            model=data.get("model"),
            history=history,
            state=data.get("state"),
            program_type=data["programType"],
        )
    except KeyError as e:
        raise ValueError(f"Malformed snapshot: missing {e}") from None
    except TypeError as e:
        raise ValueError(f"Malformed snapshot: {e}") from None


def data_to_dict(data: EventData | Any) -> Any:
    """Convert an event payload to its wire shape.

    Payloads that are not one of the known dataclasses pass through
    unchanged; the timeline never validates them.
    """
    if isinstance(data, DebuggerSnapshot):
        return snapshot_to_dict(data)
    if isinstance(data, CompilationData):
        result: dict[str, Any] = {"status": data.status}
        if data.errors is not None:
            result["errors"] = list(data.errors)
        return result
    if isinstance(data, HotReloadData):
        return {"status": data.status}
    return data


def event_to_dict(event: TimelineEvent) -> dict[str, Any]:
    """Convert a TimelineEvent to its wire shape."""
    kind = event.kind.value if isinstance(event.kind, EventKind) else event.kind
    return {
        "timestamp": event.timestamp,
        "type": kind,
        "targetName": event.target_name,
        "data": data_to_dict(event.data),
    }


def event_from_dict(payload: dict[str, Any]) -> TimelineEvent:
    """Build a TimelineEvent from its wire shape.

    Raises:
        ValueError: If ``type`` is not a known event kind or a required
            field is missing.
    """
    try:
        kind = EventKind(payload["type"])
    except KeyError:
        raise ValueError("Event is missing 'type'") from None
    except ValueError:
        raise ValueError(f"Unknown event type: {payload['type']!r}") from None

    raw = payload.get("data")
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Malformed {kind.value} event: data must be an object")

    try:
        if kind is EventKind.COMPILATION:
            errors = raw.get("errors")
            if errors is not None and not isinstance(errors, list):
                raise ValueError(
                    f"Malformed {kind.value} event: errors must be a list"
                )
            data: EventData = CompilationData(
                status=raw["status"],
                errors=list(errors) if errors is not None else None,
            )
        elif kind is EventKind.DEBUGGER_SNAPSHOT:
            data = snapshot_from_dict(raw)
        else:
            data = HotReloadData(status=raw["status"])

        return TimelineEvent(
            timestamp=payload["timestamp"],
            kind=kind,
            target_name=payload["targetName"],
            data=data,
        )
    except KeyError as e:
        raise ValueError(f"Malformed {kind.value} event: missing {e}") from None
