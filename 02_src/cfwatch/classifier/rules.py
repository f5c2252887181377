"""Subject pattern rules."""

from dataclasses import dataclass

from ..models import MessageKind


@dataclass(frozen=True)
class SubjectRule:
    """Maps a subject pattern to a message kind.

    Patterns are dot-separated. A ``<name>`` segment captures exactly one
    segment, ``*`` matches one segment without capturing, and a trailing
    ``>`` matches one or more remaining segments. ``display`` is an optional
    template for the subject shown to the user; captured values are
    substituted by name after shortening.
    """

    pattern: str
    kind: MessageKind
    display: str | None = None

    @property
    def segments(self) -> list[str]:
        return self.pattern.split(".")


# First match wins.
RULES: list[SubjectRule] = [
    SubjectRule("droplet.exited", MessageKind.INSTANCE_EXITED),
    SubjectRule("droplet.updated", MessageKind.DROPLET_UPDATED),
    SubjectRule("dea.heartbeat", MessageKind.HEARTBEAT),
    SubjectRule("dea.advertise", MessageKind.ADVERTISE),
    SubjectRule("dea.stop", MessageKind.INSTANCE_STOP),
    SubjectRule("dea.update", MessageKind.INSTANCE_UPDATE),
    SubjectRule("dea.find.droplet", MessageKind.DROPLET_QUERY),
    SubjectRule("dea.<dea>.start", MessageKind.INSTANCE_START, display="dea.{dea}.start"),
    SubjectRule("router.register", MessageKind.ROUTE_REGISTERED),
    SubjectRule("router.unregister", MessageKind.ROUTE_UNREGISTERED),
    SubjectRule("healthmanager.status", MessageKind.HEALTH_QUERY),
]


def short_id(value) -> str:
    """Shorten an "<index>-<uuid>" component id to its index."""
    return str(value).split("-", 1)[0]
