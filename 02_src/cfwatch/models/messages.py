"""Bus message and display line data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Message:
    """A single message as delivered by the bus subscription."""

    subject: str
    body: str = ""
    reply_to: str | None = None


@dataclass(frozen=True)
class PendingRequest:
    """A request that expects a reply on an ephemeral subject."""

    original_subject: str
    sequence: int | None  # None when the request was not relevant
    relevant: bool = True


class LineType(str, Enum):
    """Kinds of lines handed to the output sink."""

    PRIMARY = "primary"
    REPLY = "reply"
    DIAGNOSTIC = "diagnostic"


@dataclass
class OutputLine:
    """A rendered line ready for the output sink."""

    line_type: LineType
    subject: str
    detail: str
    timestamp: datetime
    sequence: int | None = None
    kind: str = "unknown"
