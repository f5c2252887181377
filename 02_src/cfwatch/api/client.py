"""Control-plane API client used to resolve application names."""

from typing import Protocol

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import AppNotFoundError, ControlPlaneError
from ..logging_config import get_logger

logger = get_logger(__name__)


class AppMetadata(BaseModel):
    """Metadata block of an app resource."""

    guid: str


class AppEntity(BaseModel):
    """Entity block of an app resource."""

    name: str


class AppResource(BaseModel):
    """A single app resource."""

    metadata: AppMetadata
    entity: AppEntity


class AppListResponse(BaseModel):
    """Response model for the app listing endpoint."""

    total_results: int = 0
    resources: list[AppResource] = []


class IControlPlaneClient(Protocol):
    """Looks up applications on the control plane."""

    async def resolve_app_guid(self, name: str) -> str:
        """Return the GUID of the app with the given name."""
        ...

    async def aclose(self) -> None:
        """Release the HTTP client."""
        ...


class ControlPlaneClient:
    """HTTP client for the control-plane apps endpoint."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = (
                token if token.lower().startswith("bearer ") else f"Bearer {token}"
            )

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=10.0,
        )
        if not self._owns_client:
            self._client.headers.update(headers)

    async def resolve_app_guid(self, name: str) -> str:
        """Return the GUID of the app with the given name."""
        try:
            response = await self._client.get("/v2/apps", params={"q": f"name:{name}"})
            response.raise_for_status()
            apps = AppListResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise ControlPlaneError(f"app lookup failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise ControlPlaneError(f"unexpected app lookup response: {e}") from e

        for resource in apps.resources:
            if resource.entity.name == name:
                logger.info("Resolved app %s to %s", name, resource.metadata.guid)
                return resource.metadata.guid

        raise AppNotFoundError(name)

    async def aclose(self) -> None:
        """Release the HTTP client."""
        if self._owns_client:
            await self._client.aclose()
