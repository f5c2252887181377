"""Dispatch module."""

from .dispatcher import Dispatcher, DispatchResult, IOutputSink, WatchSession

__all__ = ["DispatchResult", "Dispatcher", "IOutputSink", "WatchSession"]
