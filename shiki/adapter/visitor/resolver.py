"""Visitor identity resolvers.

Resolution is best effort and never raises: a failed lookup degrades to the
"unknown" visitor, for which like de-duplication is off.
"""

import httpx
import logfire
from pydantic import ValidationError

from shiki.adapter.error import VisitorLookupError
from shiki.domain.service.visitor_identity import VisitorIdentityResolver
from shiki.domain.value import VisitorId


class RequestVisitorIdentityResolver(VisitorIdentityResolver):
    """Uses the address the caller already knows, without any network call."""

    async def resolve(self, hint: str | None = None) -> VisitorId:
        """Return the hint as the identity, or unknown when it is blank."""
        try:
            return VisitorId(hint) if hint else VisitorId.unknown()
        except ValidationError:
            logfire.warn("Unusable visitor hint", hint=hint)
            return VisitorId.unknown()


class IpLookupVisitorIdentityResolver(RequestVisitorIdentityResolver):
    """Falls back to a public IP lookup service when no hint is given.

    The service must answer ``{"ip": "<address>"}``.
    """

    def __init__(self, lookup_url: str, timeout: float = 5.0) -> None:
        """Initialize resolver.

        Args:
            lookup_url: IP lookup endpoint
            timeout: Request timeout in seconds
        """
        self.lookup_url = lookup_url
        self.timeout = timeout

    async def resolve(self, hint: str | None = None) -> VisitorId:
        """Resolve the visitor, preferring ``hint`` over a lookup."""
        if hint:
            return await super().resolve(hint)

        with logfire.span("visitor.lookup", url=self.lookup_url):
            try:
                address = await self._lookup()
                return VisitorId(address)
            except (VisitorLookupError, ValidationError) as e:
                logfire.warn("Visitor lookup failed", error=str(e))
                return VisitorId.unknown()

    async def _lookup(self) -> str:
        """Fetch the public address.

        Raises:
            VisitorLookupError: On transport errors, non-200 answers or an
                unexpected body
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.lookup_url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise VisitorLookupError(
                f"HTTP error during lookup: {e}", self.lookup_url
            ) from e

        if response.status_code != 200:
            raise VisitorLookupError(
                f"Lookup failed: {response.status_code}", self.lookup_url
            )

        try:
            address = response.json()["ip"]
        except (ValueError, KeyError, TypeError) as e:
            raise VisitorLookupError(
                f"Unexpected lookup response: {e}", self.lookup_url
            ) from e
        if not isinstance(address, str) or not address.strip():
            raise VisitorLookupError("Lookup returned no address", self.lookup_url)
        return address
