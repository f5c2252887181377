"""Exception hierarchy for cfwatch."""


class WatchError(Exception):
    """Base class for cfwatch errors."""


class PayloadDecodeError(WatchError):
    """Message body is not valid structured text."""


class MissingFieldError(WatchError):
    """A formatter required a field the payload does not carry."""

    def __init__(self, field_name: str):
        super().__init__(f"missing field '{field_name}'")
        self.field_name = field_name


class AppNotFoundError(WatchError):
    """No application with the given name is visible to the user."""

    def __init__(self, name: str):
        super().__init__(f"Unknown app '{name}'")
        self.name = name


class ControlPlaneError(WatchError):
    """Control-plane API request failed."""


class BusConnectionError(WatchError):
    """Could not connect or subscribe to the message bus."""
