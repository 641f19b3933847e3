"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def make_event(timestamp, kind="compilation", target_name="app", data=None):
    """Build a TimelineEvent with a payload matching its kind."""
    from timeline.models import (
        CompilationData,
        EventKind,
        HotReloadData,
        TimelineEvent,
    )

    kind = EventKind(kind)
    if data is None:
        if kind is EventKind.COMPILATION:
            data = CompilationData(status="success")
        elif kind is EventKind.HOT_RELOAD:
            data = HotReloadData(status="success")
        else:
            data = make_snapshot(target_name, timestamp)
    return TimelineEvent(
        timestamp=timestamp, kind=kind, target_name=target_name, data=data
    )


def make_snapshot(target_name="app", timestamp=0, model=None):
    """Build a DebuggerSnapshot payload."""
    from timeline.models import DebuggerSnapshot, SnapshotHistory

    return DebuggerSnapshot(
        target_name=target_name,
        timestamp=timestamp,
        model=model if model is not None else {"count": timestamp},
        history=SnapshotHistory(num_messages=1, recent=["Increment"]),
        state={"paused": False},
        program_type="application",
    )


@pytest.fixture
def store():
    """Create a small timeline store."""
    from timeline.store import StateTimeline

    return StateTimeline(max_size=5)


@pytest.fixture
def recorder(store):
    """Create TimelineRecorder over the store."""
    from timeline.recorder import TimelineRecorder

    return TimelineRecorder(store)


@pytest_asyncio.fixture
async def application():
    """Create and start an Application with a small capacity."""
    from timeline.app import Application

    app = Application(max_size=5)
    await app.start()
    yield app
    await app.stop()
