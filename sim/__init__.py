"""Simulated timeline event producer."""

from .sim import ISim, Sim

__all__ = ["ISim", "Sim"]
