"""Core data models for cfwatch."""

from .kinds import MessageKind
from .messages import LineType, Message, OutputLine, PendingRequest

__all__ = [
    # Messages
    "Message",
    "PendingRequest",
    # Output
    "LineType",
    "OutputLine",
    # Kinds
    "MessageKind",
]
