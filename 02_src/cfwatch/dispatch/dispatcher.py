"""Dispatch loop: decode, filter, classify, correlate, format, emit."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Protocol

from ..classifier import Classification, SubjectClassifier
from ..formatters import FormatContext, FormatterRegistry
from ..logging_config import get_logger
from ..models import LineType, Message, OutputLine, PendingRequest
from ..payload import DecodeResult, decode_payload
from ..relevance import RelevanceFilter
from ..tracker import CorrelationTracker, SequenceCounter

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class IOutputSink(Protocol):
    """Receives display lines in arrival order."""

    def emit(self, line: OutputLine) -> None:
        """Write one line."""
        ...


class WatchSession:
    """State shared across messages for one watched GUID."""

    def __init__(self, guid: str):
        self.guid = guid
        self.relevance = RelevanceFilter(guid)
        self.requests = CorrelationTracker()
        self.sequences = SequenceCounter()


@dataclass
class DispatchResult:
    """Outcome of running one message through the pipeline."""

    message: Message
    lines: list[OutputLine] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe_error(self) -> str:
        """The diagnostic text for a failed message."""
        return (
            f"couldn't deal w/ {self.message.subject} '{self.message.body}': "
            f"{type(self.error).__name__}: {self.error}"
        )


class Dispatcher:
    """Runs every inbound message through the pipeline, one at a time.

    A failure while handling one message becomes a single diagnostic line;
    the next message is processed as if nothing happened.
    """

    def __init__(
        self,
        session: WatchSession,
        sink: IOutputSink,
        classifier: SubjectClassifier | None = None,
        registry: FormatterRegistry | None = None,
        clock: Clock = datetime.now,
    ):
        self._session = session
        self._sink = sink
        self._classifier = classifier or SubjectClassifier()
        self._registry = registry or FormatterRegistry()
        self._clock = clock

    @property
    def session(self) -> WatchSession:
        return self._session

    def dispatch(self, message: Message) -> DispatchResult:
        """Process one message and emit its output lines."""
        result = self.process(message)

        if result.ok:
            for line in result.lines:
                self._sink.emit(line)
        else:
            self._sink.emit(
                OutputLine(
                    line_type=LineType.DIAGNOSTIC,
                    subject=message.subject,
                    detail=result.describe_error(),
                    timestamp=self._clock(),
                )
            )

        return result

    def process(self, message: Message) -> DispatchResult:
        """Run the pipeline for one message without emitting anything."""
        try:
            lines = self._process(message)
        except Exception as e:
            logger.warning(
                "Failed to handle message on %s",
                message.subject,
                exc_info=True,
                extra={"context": {"reply_to": message.reply_to, "body": message.body}},
            )
            return DispatchResult(message=message, error=e)

        return DispatchResult(message=message, lines=lines)

    def _process(self, message: Message) -> list[OutputLine]:
        # 1. Decode
        decoded = decode_payload(message.body)
        if not decoded.ok:
            logger.debug("Undecodable body on %s: %s", message.subject, decoded.error)

        classification = self._classifier.classify(message.subject)
        pending = self._session.requests.lookup(message.subject)

        # 2. Relevance (a reply to a relevant request is always relevant)
        if pending is not None and pending.relevant:
            relevant = True
        else:
            relevant = self._session.relevance.is_relevant(
                message, decoded, classification.kind
            )

        # 3. Count (replies reuse the sequence of their request)
        sequence = None
        if relevant:
            if pending is not None:
                sequence = pending.sequence
            else:
                sequence = self._session.sequences.advance(
                    classification.display_subject
                )

        # 4. Remember the request so its replies can be nested under it
        if message.reply_to:
            subject = (
                pending.original_subject
                if pending is not None
                else classification.display_subject
            )
            self._session.requests.register(
                subject, message.reply_to, sequence, relevant=relevant
            )

        # 5. Format
        if not relevant:
            return []
        if pending is not None:
            line = self._format_reply(message, decoded, pending)
        else:
            line = self._format_primary(message, decoded, classification, sequence)

        return [line] if line is not None else []

    def _format_primary(
        self,
        message: Message,
        decoded: DecodeResult,
        classification: Classification,
        sequence: int,
    ) -> OutputLine | None:
        ctx = FormatContext(
            decoded=decoded,
            raw_body=message.body,
            guid=self._session.guid,
            sequence=sequence,
            segments=classification.segments,
            reply_expected=bool(message.reply_to),
        )
        detail = self._registry.format(classification.kind, ctx)
        if detail is None:
            return None

        return OutputLine(
            line_type=LineType.PRIMARY,
            subject=classification.display_subject,
            detail=detail,
            timestamp=self._clock(),
            sequence=sequence,
            kind=classification.kind.value,
        )

    def _format_reply(
        self,
        message: Message,
        decoded: DecodeResult,
        pending: PendingRequest,
    ) -> OutputLine | None:
        request = self._classifier.classify(pending.original_subject)
        ctx = FormatContext(
            decoded=decoded,
            raw_body=message.body,
            guid=self._session.guid,
            sequence=pending.sequence or 0,
            segments=request.segments,
            reply_expected=bool(message.reply_to),
        )
        detail = self._registry.format_reply(request.kind, ctx)
        if detail is None:
            return None

        return OutputLine(
            line_type=LineType.REPLY,
            subject=pending.original_subject,
            detail=detail,
            timestamp=self._clock(),
            sequence=pending.sequence,
            kind=request.kind.value,
        )
