"""Pytest configuration and fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

GUID = "5e8b0f6a-33b1-4c4e-9d1e-4a1f2c3b4d5e"
OTHER_GUID = "eaebd610-0e15-4935-9784-b676d7d8495e"
FIXED_NOW = datetime(2013, 5, 22, 15, 45, 4)


@pytest.fixture
def guid():
    """The watched application GUID."""
    return GUID


@pytest.fixture
def session(guid):
    """Create a fresh watch session."""
    from cfwatch.dispatch import WatchSession

    return WatchSession(guid)


@pytest.fixture
def sink():
    """Create an in-memory output sink."""
    from cfwatch.output_router import ListSink

    return ListSink()


@pytest.fixture
def dispatcher(session, sink):
    """Create a Dispatcher writing to the in-memory sink with a frozen clock."""
    from cfwatch.dispatch import Dispatcher

    return Dispatcher(session, sink, clock=lambda: FIXED_NOW)


@pytest.fixture
def send(dispatcher):
    """Dispatch a message given (body, reply_to, subject)."""
    from cfwatch.models import Message

    def _send(body, reply_to, subject):
        return dispatcher.dispatch(
            Message(subject=subject, body=body or "", reply_to=reply_to)
        )

    return _send
