"""Message kind tags."""

from enum import Enum


class MessageKind(str, Enum):
    """Semantic category of a bus message, derived from its subject."""

    INSTANCE_EXITED = "instance-exited"
    HEARTBEAT = "heartbeat"
    ADVERTISE = "advertise"
    ROUTE_REGISTERED = "route-registered"
    ROUTE_UNREGISTERED = "route-unregistered"
    INSTANCE_START = "instance-start"
    DROPLET_UPDATED = "droplet-updated"
    INSTANCE_STOP = "instance-stop"
    INSTANCE_UPDATE = "instance-update"
    DROPLET_QUERY = "droplet-query"
    HEALTH_QUERY = "health-query"
    UNKNOWN = "unknown"
