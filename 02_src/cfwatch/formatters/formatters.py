"""Per-kind detail formatters.

Every formatter takes a FormatContext and returns the detail text for one
display line, or None when the message must not be shown at all.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from ..classifier import short_id
from ..payload import ABSENT, DecodeResult, Payload

SEPARATOR = ", "
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"


@dataclass
class FormatContext:
    """Everything a formatter may look at for one message."""

    decoded: DecodeResult
    raw_body: str
    guid: str
    sequence: int
    segments: dict[str, str] = field(default_factory=dict)
    reply_expected: bool = False

    @property
    def payload(self) -> Payload:
        """Structured payload; raises PayloadDecodeError if the body was malformed."""
        return self.decoded.structured()


Formatter = Callable[[FormatContext], str | None]


def display_value(value: Any) -> str:
    """Render a JSON scalar or list for display."""
    if isinstance(value, list):
        return SEPARATOR.join(display_value(item) for item in value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe(*pairs: tuple[str, Any]) -> str:
    """Join key/value pairs as "key: value, ...", skipping absent values."""
    return SEPARATOR.join(
        f"{key}: {display_value(value)}" for key, value in pairs if value is not ABSENT
    )


def lower(value: Any) -> Any:
    """Lower-case a state name (or each one of a list of them)."""
    if isinstance(value, list):
        return [lower(item) for item in value]
    if isinstance(value, str):
        return value.lower()
    return value


def dea_id(value: Any) -> Any:
    return value if value is ABSENT else short_id(value)


def format_timestamp(epoch_seconds: Any) -> str:
    """Render epoch seconds as local calendar time."""
    moment = datetime.fromtimestamp(float(epoch_seconds)).astimezone()
    return moment.strftime(TIMESTAMP_FORMAT)


def format_raw(ctx: FormatContext) -> str:
    return ctx.raw_body


def format_instance_exited(ctx: FormatContext) -> str:
    payload = ctx.payload
    return describe(("reason", payload.get("reason")), ("index", payload.get("index")))


def format_heartbeat(ctx: FormatContext) -> str:
    """Count the states of the watched app's instances on one DEA."""
    payload = ctx.payload
    states = Counter(
        lower(record.get("state"))
        for record in payload.records("droplets")
        if record.get("droplet") == ctx.guid and record.has("state")
    )
    return describe(
        ("dea", dea_id(payload.get("dea"))),
        *((display_value(state), count) for state, count in states.items()),
    )


def format_suppressed(ctx: FormatContext) -> None:
    return None


def format_route(ctx: FormatContext) -> str:
    payload = ctx.payload
    return describe(
        ("dea", dea_id(payload.get("dea"))),
        ("uris", payload.sequence("uris")),
        ("host", payload.get("host")),
        ("port", payload.get("port")),
    )


def format_instance_start(ctx: FormatContext) -> str:
    payload = ctx.payload
    dea = ctx.segments.get("dea", payload.get("dea"))
    return describe(
        ("dea", dea_id(dea)),
        ("index", payload.get("index")),
        ("uris", payload.sequence("uris")),
    )


def format_droplet_updated(ctx: FormatContext) -> str:
    # Only bookkeeping fields (droplet, cc_partition) are ever sent.
    ctx.decoded.structured()
    return ""


def format_instance_stop(ctx: FormatContext) -> str:
    payload = ctx.payload
    if payload.has("indices"):
        return f"scaling down indices: {display_value(payload.sequence('indices'))}"
    if payload.has("instances"):
        return f"killing extra instances: {display_value(payload.sequence('instances'))}"
    return "stopping application"


def format_instance_update(ctx: FormatContext) -> str:
    return describe(("uris", ctx.payload.sequence("uris")))


def format_droplet_query(ctx: FormatContext) -> str:
    detail = describe(("states", lower(ctx.payload.sequence("states"))))
    return f"querying {detail}" if ctx.reply_expected else detail


def format_health_query(ctx: FormatContext) -> str:
    return "querying " + describe(("states", lower(ctx.payload.get("state"))))


def format_droplet_query_reply(ctx: FormatContext) -> str:
    payload = ctx.payload
    return describe(
        ("dea", dea_id(payload.get("dea"))),
        ("index", payload.get("index")),
        ("state", lower(payload.get("state"))),
        ("since", format_timestamp(payload.require("state_timestamp"))),
    )


def format_health_query_reply(ctx: FormatContext) -> str:
    return describe(("indices", ctx.payload.sequence("indices")))
