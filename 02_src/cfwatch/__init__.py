"""Live bus watcher for a single application."""

from .app import Application, IApplication
from .classifier import Classification, SubjectClassifier, SubjectRule
from .dispatch import Dispatcher, DispatchResult, IOutputSink, WatchSession
from .event_bus import IEventBus, MessageQueue, NatsEventBus
from .formatters import FormatContext, FormatterRegistry
from .models import LineType, Message, MessageKind, OutputLine, PendingRequest
from .output_router import ListSink, OutputRouter, render_plain
from .payload import DecodeResult, Payload, decode_payload
from .relevance import RelevanceFilter
from .tracker import CorrelationTracker, SequenceCounter

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Message",
    "MessageKind",
    "PendingRequest",
    "LineType",
    "OutputLine",
    # Components
    "Payload",
    "DecodeResult",
    "decode_payload",
    "RelevanceFilter",
    "SubjectRule",
    "Classification",
    "SubjectClassifier",
    "CorrelationTracker",
    "SequenceCounter",
    "FormatContext",
    "FormatterRegistry",
    "WatchSession",
    "DispatchResult",
    "Dispatcher",
    "IOutputSink",
    "IEventBus",
    "MessageQueue",
    "NatsEventBus",
    "OutputRouter",
    "ListSink",
    "render_plain",
]
