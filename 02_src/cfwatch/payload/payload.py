"""Payload decoding and safe field access."""

import json
from dataclasses import dataclass
from typing import Any

from ..errors import MissingFieldError, PayloadDecodeError

# Marker returned by accessors for fields the payload does not carry.
ABSENT = object()


class Payload:
    """Read-only view over a decoded message body.

    Accessors never raise on a missing field or an unexpected shape; they
    return ``ABSENT`` (or an empty list) instead. ``require`` is the one
    accessor that raises, for formatters that cannot render without a field.
    """

    def __init__(self, value: Any = None):
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    @property
    def is_mapping(self) -> bool:
        return isinstance(self._value, dict)

    @property
    def is_empty(self) -> bool:
        return self._value is None

    def has(self, name: str) -> bool:
        """Check whether a top-level field is present."""
        return self.is_mapping and name in self._value

    def get(self, name: str, default: Any = ABSENT) -> Any:
        """Get a top-level field, or default when absent."""
        if not self.is_mapping:
            return default
        return self._value.get(name, default)

    def require(self, name: str) -> Any:
        """Get a top-level field, raising MissingFieldError when absent."""
        value = self.get(name)
        if value is ABSENT:
            raise MissingFieldError(name)
        return value

    def sequence(self, name: str) -> list:
        """Get a top-level list field; anything else yields []."""
        value = self.get(name)
        return value if isinstance(value, list) else []

    def records(self, name: str) -> list["Payload"]:
        """Get the object entries of a top-level list field as Payloads."""
        return [Payload(item) for item in self.sequence(name) if isinstance(item, dict)]

    def __repr__(self) -> str:
        return f"Payload({self._value!r})"


@dataclass
class DecodeResult:
    """Outcome of decoding a message body."""

    payload: Payload
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def structured(self) -> Payload:
        """Return the payload, raising if the body failed to decode."""
        if self.error is not None:
            raise PayloadDecodeError(self.error)
        return self.payload


def decode_payload(body: str | bytes | None) -> DecodeResult:
    """Decode a raw body into a Payload. Never raises."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    if body is None or not body.strip():
        return DecodeResult(payload=Payload(None))

    try:
        return DecodeResult(payload=Payload(json.loads(body)))
    except (ValueError, RecursionError) as e:
        return DecodeResult(payload=Payload(None), error=str(e))
