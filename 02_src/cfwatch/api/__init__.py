"""Control-plane API module."""

from .client import (
    AppListResponse,
    AppResource,
    ControlPlaneClient,
    IControlPlaneClient,
)

__all__ = [
    "AppListResponse",
    "AppResource",
    "ControlPlaneClient",
    "IControlPlaneClient",
]
