"""Tracker module."""

from .tracker import CorrelationTracker, ICorrelationTracker, SequenceCounter

__all__ = ["CorrelationTracker", "ICorrelationTracker", "SequenceCounter"]
