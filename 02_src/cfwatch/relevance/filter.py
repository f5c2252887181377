"""Relevance filter implementation."""

from typing import Protocol

from ..models import Message, MessageKind
from ..payload import DecodeResult, Payload

# Top-level fields that carry an application GUID, for every known kind.
# Unknown kinds have no field list; their raw body is searched instead.
GUID_FIELDS = ("droplet", "app")

# Kinds whose payload nests per-instance records: kind -> (list field, guid field).
NESTED_GUID_FIELDS: dict[MessageKind, tuple[str, str]] = {
    MessageKind.HEARTBEAT: ("droplets", "droplet"),
}


class IRelevanceFilter(Protocol):
    """Decides whether a message concerns the watched GUID."""

    def is_relevant(
        self, message: Message, decoded: DecodeResult, kind: MessageKind
    ) -> bool:
        """Check subject text and payload fields for the watched GUID."""
        ...


class RelevanceFilter:
    """Matches messages against a single watched GUID."""

    def __init__(self, guid: str):
        if not guid:
            raise ValueError("watched GUID must not be empty")
        self._guid = guid

    @property
    def guid(self) -> str:
        return self._guid

    def is_relevant(
        self, message: Message, decoded: DecodeResult, kind: MessageKind
    ) -> bool:
        """Check subject text and payload fields for the watched GUID."""
        if self._guid in message.subject:
            return True

        payload = decoded.payload
        if payload.is_mapping and kind != MessageKind.UNKNOWN:
            return self._payload_mentions(payload, kind)

        # Unknown kinds and bodies that are not objects are matched as text
        return self._guid in (message.body or "")

    def matching_records(self, payload: Payload, kind: MessageKind) -> list[Payload]:
        """Return the nested per-instance records that belong to the GUID."""
        if kind not in NESTED_GUID_FIELDS:
            return []
        list_field, guid_field = NESTED_GUID_FIELDS[kind]
        return [
            record
            for record in payload.records(list_field)
            if record.get(guid_field) == self._guid
        ]

    def _payload_mentions(self, payload: Payload, kind: MessageKind) -> bool:
        if any(payload.get(name) == self._guid for name in GUID_FIELDS):
            return True
        return bool(self.matching_records(payload, kind))
