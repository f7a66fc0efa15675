"""Visitor identity infrastructure providers."""

from dishka import Scope, provide

from shiki.adapter.visitor import IpLookupVisitorIdentityResolver
from shiki.config import VisitorSettings
from shiki.domain.service import VisitorIdentityResolver
from shiki.util.di.base import ProviderBase


class VisitorProvider(ProviderBase):
    """Visitor identity component base."""

    __mock_component__ = "visitor"


class ProdVisitorProvider(VisitorProvider):
    """Production visitor provider using a public IP lookup."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_visitor_resolver(
        self, visitor_settings: VisitorSettings
    ) -> VisitorIdentityResolver:
        """Provide visitor identity resolver."""
        return IpLookupVisitorIdentityResolver(
            lookup_url=visitor_settings.lookup_url,
            timeout=visitor_settings.timeout_seconds,
        )
