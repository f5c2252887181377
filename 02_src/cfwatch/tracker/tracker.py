"""Correlation and sequence tracking for one watch session."""

from typing import Protocol

from ..models import PendingRequest


class ICorrelationTracker(Protocol):
    """Maps reply subjects back to the requests that created them."""

    def register(
        self, subject: str, reply_to: str, sequence: int | None, relevant: bool = True
    ) -> None:
        """Remember that replies on reply_to answer subject (sequence)."""
        ...

    def lookup(self, subject: str) -> PendingRequest | None:
        """Find the pending request whose reply subject is subject."""
        ...


class CorrelationTracker:
    """Reply-subject -> pending request table.

    Entries never expire and lookups do not consume them, so several replies
    on the same reply subject all resolve to their request.
    """

    def __init__(self):
        self._pending: dict[str, PendingRequest] = {}

    def register(
        self, subject: str, reply_to: str, sequence: int | None, relevant: bool = True
    ) -> None:
        """Remember that replies on reply_to answer subject (sequence)."""
        if not reply_to:
            return
        self._pending[reply_to] = PendingRequest(
            original_subject=subject,
            sequence=sequence,
            relevant=relevant,
        )

    def lookup(self, subject: str) -> PendingRequest | None:
        """Find the pending request whose reply subject is subject."""
        return self._pending.get(subject)

    def __contains__(self, subject: str) -> bool:
        return subject in self._pending

    def __len__(self) -> int:
        return len(self._pending)


class SequenceCounter:
    """Per-subject occurrence counter, starting at 1."""

    def __init__(self):
        self._counts: dict[str, int] = {}

    def advance(self, subject: str) -> int:
        """Count one more occurrence of subject and return its number."""
        self._counts[subject] = self._counts.get(subject, 0) + 1
        return self._counts[subject]

    def current(self, subject: str) -> int:
        """Last number handed out for subject, 0 if never seen."""
        return self._counts.get(subject, 0)
