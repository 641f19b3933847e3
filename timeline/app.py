"""Application bootstrap and lifecycle management."""

import os
from typing import Protocol

from .config import resolve_max_size
from .logging_config import get_logger, log_context
from .recorder import ITimelineRecorder, TimelineRecorder
from .store import ITimelineStore, StateTimeline

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop all retained timeline events."""
        ...

    @property
    def store(self) -> ITimelineStore:
        ...

    @property
    def recorder(self) -> ITimelineRecorder:
        ...


class Application:
    """Main application bootstrap."""

    def __init__(self, max_size: int | None = None):
        env_max_size = os.getenv("TIMELINE_MAX_SIZE") if max_size is None else max_size
        self._max_size = resolve_max_size(env_max_size)

        # Components (will be initialized in start())
        self._store: StateTimeline | None = None
        self._recorder: TimelineRecorder | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application", extra=log_context(max_size=self._max_size))

        # 1. Store (no dependencies)
        self._store = StateTimeline(self._max_size)
        logger.info("Timeline store initialized")

        # 2. Recorder (depends on Store)
        self._recorder = TimelineRecorder(self._store)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._recorder = None
        if self._store is not None:
            self._store.clear()
            self._store = None
            logger.info("Timeline store released")

    async def reset(self) -> None:
        """Drop all retained timeline events."""
        if self._store is not None:
            self._store.clear()
            logger.info("Reset complete")

    @property
    def store(self) -> StateTimeline:
        """Get timeline store instance."""
        if self._store is None:
            raise RuntimeError("Application not started")
        return self._store

    @property
    def recorder(self) -> TimelineRecorder:
        """Get recorder instance."""
        if self._recorder is None:
            raise RuntimeError("Application not started")
        return self._recorder
