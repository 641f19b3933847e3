"""Timeline store module."""

from .store import ITimelineStore, StateTimeline

__all__ = ["ITimelineStore", "StateTimeline"]
