"""Recorder module."""

from .recorder import ITimelineRecorder, TimelineRecorder, now_millis

__all__ = ["ITimelineRecorder", "TimelineRecorder", "now_millis"]
