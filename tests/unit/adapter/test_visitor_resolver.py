"""Unit tests for visitor identity resolvers."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from shiki.adapter.visitor import (
    IpLookupVisitorIdentityResolver,
    RequestVisitorIdentityResolver,
)
from shiki.domain.value import VisitorId

LOOKUP_URL = "https://api.ipify.org?format=json"


def _mock_client(response=None, error=None):
    """Patchable stand-in for ``httpx.AsyncClient`` used as a context manager."""
    client = MagicMock()
    client.get = AsyncMock(return_value=response, side_effect=error)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def _response(status_code: int, body) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestRequestVisitorIdentityResolver:
    """Tests for the offline resolver."""

    @pytest.mark.asyncio
    async def test_hint_is_identity(self):
        resolver = RequestVisitorIdentityResolver()
        assert await resolver.resolve("198.51.100.4") == VisitorId("198.51.100.4")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("hint", [None, "", "   "])
    async def test_blank_hint_is_unknown(self, hint):
        resolver = RequestVisitorIdentityResolver()
        assert (await resolver.resolve(hint)).is_unknown


class TestIpLookupVisitorIdentityResolver:
    """Tests for the lookup-backed resolver."""

    @pytest.mark.asyncio
    async def test_hint_skips_lookup(self):
        resolver = IpLookupVisitorIdentityResolver(LOOKUP_URL)
        with patch("shiki.adapter.visitor.resolver.httpx.AsyncClient") as client_cls:
            visitor = await resolver.resolve("198.51.100.4")

        assert visitor == VisitorId("198.51.100.4")
        client_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_address(self):
        resolver = IpLookupVisitorIdentityResolver(LOOKUP_URL, timeout=2.0)
        client = _mock_client(_response(200, {"ip": "203.0.113.9"}))
        with patch(
            "shiki.adapter.visitor.resolver.httpx.AsyncClient", return_value=client
        ):
            visitor = await resolver.resolve()

        assert visitor == VisitorId("203.0.113.9")
        client.get.assert_awaited_once_with(LOOKUP_URL, timeout=2.0)

    @pytest.mark.asyncio
    async def test_transport_error_is_unknown(self):
        resolver = IpLookupVisitorIdentityResolver(LOOKUP_URL)
        client = _mock_client(error=httpx.ConnectError("down"))
        with patch(
            "shiki.adapter.visitor.resolver.httpx.AsyncClient", return_value=client
        ):
            visitor = await resolver.resolve()

        assert visitor.is_unknown

    @pytest.mark.asyncio
    async def test_bad_status_is_unknown(self):
        resolver = IpLookupVisitorIdentityResolver(LOOKUP_URL)
        client = _mock_client(_response(503, {}))
        with patch(
            "shiki.adapter.visitor.resolver.httpx.AsyncClient", return_value=client
        ):
            visitor = await resolver.resolve()

        assert visitor.is_unknown

    @pytest.mark.asyncio
    async def test_unexpected_body_is_unknown(self):
        resolver = IpLookupVisitorIdentityResolver(LOOKUP_URL)
        client = _mock_client(_response(200, {"address": "203.0.113.9"}))
        with patch(
            "shiki.adapter.visitor.resolver.httpx.AsyncClient", return_value=client
        ):
            visitor = await resolver.resolve()

        assert visitor.is_unknown
