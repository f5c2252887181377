"""Formatter registry implementation."""

from ..models import MessageKind
from . import formatters as fmt
from .formatters import FormatContext, Formatter

FORMATTERS: dict[MessageKind, Formatter] = {
    MessageKind.INSTANCE_EXITED: fmt.format_instance_exited,
    MessageKind.HEARTBEAT: fmt.format_heartbeat,
    MessageKind.ADVERTISE: fmt.format_suppressed,
    MessageKind.ROUTE_REGISTERED: fmt.format_route,
    MessageKind.ROUTE_UNREGISTERED: fmt.format_route,
    MessageKind.INSTANCE_START: fmt.format_instance_start,
    MessageKind.DROPLET_UPDATED: fmt.format_droplet_updated,
    MessageKind.INSTANCE_STOP: fmt.format_instance_stop,
    MessageKind.INSTANCE_UPDATE: fmt.format_instance_update,
    MessageKind.DROPLET_QUERY: fmt.format_droplet_query,
    MessageKind.HEALTH_QUERY: fmt.format_health_query,
}

# Keyed by the kind of the request being answered.
REPLY_FORMATTERS: dict[MessageKind, Formatter] = {
    MessageKind.DROPLET_QUERY: fmt.format_droplet_query_reply,
    MessageKind.HEALTH_QUERY: fmt.format_health_query_reply,
}


class FormatterRegistry:
    """Looks up the formatter for a kind, falling back to the raw body."""

    def __init__(
        self,
        formatters: dict[MessageKind, Formatter] | None = None,
        reply_formatters: dict[MessageKind, Formatter] | None = None,
        default: Formatter = fmt.format_raw,
    ):
        self._formatters = dict(FORMATTERS if formatters is None else formatters)
        self._reply_formatters = dict(
            REPLY_FORMATTERS if reply_formatters is None else reply_formatters
        )
        self._default = default

    def register(self, kind: MessageKind, formatter: Formatter) -> None:
        """Register (or replace) the formatter for kind."""
        self._formatters[kind] = formatter

    def register_reply(self, kind: MessageKind, formatter: Formatter) -> None:
        """Register (or replace) the formatter for replies to kind."""
        self._reply_formatters[kind] = formatter

    def format(self, kind: MessageKind, ctx: FormatContext) -> str | None:
        """Format a message of the given kind."""
        return self._formatters.get(kind, self._default)(ctx)

    def format_reply(self, request_kind: MessageKind, ctx: FormatContext) -> str | None:
        """Format a reply to a request of the given kind."""
        return self._reply_formatters.get(request_kind, self._default)(ctx)
