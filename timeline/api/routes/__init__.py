"""API route modules."""

from . import control, timeline

__all__ = ["control", "timeline"]
