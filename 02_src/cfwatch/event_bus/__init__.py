"""EventBus module."""

from .event_bus import (
    ALL_SUBJECTS,
    IEventBus,
    MessageQueue,
    NatsEventBus,
    TopicHandler,
    to_message,
)

__all__ = [
    "ALL_SUBJECTS",
    "IEventBus",
    "MessageQueue",
    "NatsEventBus",
    "TopicHandler",
    "to_message",
]
