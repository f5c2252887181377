"""Tests for ControlPlaneClient."""

import httpx
import pytest

from cfwatch.api import ControlPlaneClient
from cfwatch.errors import AppNotFoundError, ControlPlaneError


def apps_response(*apps):
    return {
        "total_results": len(apps),
        "resources": [
            {"metadata": {"guid": guid}, "entity": {"name": name}} for name, guid in apps
        ],
    }


def make_client(handler, token="secret-token"):
    http_client = httpx.AsyncClient(
        base_url="https://api.example.com",
        transport=httpx.MockTransport(handler),
    )
    return ControlPlaneClient("https://api.example.com", token, http_client=http_client)


class TestResolveAppGuid:
    """Tests for ControlPlaneClient.resolve_app_guid()."""

    @pytest.mark.asyncio
    async def test_resolves_guid(self):
        """Test that the matching app's GUID is returned."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=apps_response(("myapp", "guid-1")))

        client = make_client(handler)
        assert await client.resolve_app_guid("myapp") == "guid-1"

        assert requests[0].url.path == "/v2/apps"
        assert requests[0].url.params["q"] == "name:myapp"
        assert requests[0].headers["Authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    async def test_exact_name_match(self):
        """Test that only an exact name match counts."""

        def handler(request):
            return httpx.Response(
                200, json=apps_response(("myapp-2", "guid-2"), ("myapp", "guid-1"))
            )

        assert await make_client(handler).resolve_app_guid("myapp") == "guid-1"

    @pytest.mark.asyncio
    async def test_unknown_app(self):
        """Test that no match raises AppNotFoundError."""

        def handler(request):
            return httpx.Response(200, json=apps_response())

        with pytest.raises(AppNotFoundError) as exc_info:
            await make_client(handler).resolve_app_guid("some-bogus-app")
        assert str(exc_info.value) == "Unknown app 'some-bogus-app'"

    @pytest.mark.asyncio
    async def test_http_error(self):
        """Test that an HTTP failure raises ControlPlaneError."""

        def handler(request):
            return httpx.Response(401, json={"description": "Invalid Auth Token"})

        with pytest.raises(ControlPlaneError):
            await make_client(handler).resolve_app_guid("myapp")

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        """Test that an unexpected body raises ControlPlaneError."""

        def handler(request):
            return httpx.Response(200, json={"resources": [{"metadata": {}}]})

        with pytest.raises(ControlPlaneError):
            await make_client(handler).resolve_app_guid("myapp")

    @pytest.mark.asyncio
    async def test_bearer_prefix_not_doubled(self):
        """Test that a token already carrying its scheme is sent as-is."""
        seen = []

        def handler(request):
            seen.append(request.headers["Authorization"])
            return httpx.Response(200, json=apps_response(("myapp", "guid-1")))

        await make_client(handler, token="bearer abc").resolve_app_guid("myapp")
        assert seen == ["bearer abc"]


class TestClose:
    """Tests for ControlPlaneClient.aclose()."""

    @pytest.mark.asyncio
    async def test_injected_client_left_open(self):
        """Test that an injected HTTP client is not closed."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = ControlPlaneClient("https://api.example.com", http_client=http_client)

        await client.aclose()
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        """Test that the client's own HTTP client is closed."""
        client = ControlPlaneClient("https://api.example.com")
        await client.aclose()
        assert client._client.is_closed
