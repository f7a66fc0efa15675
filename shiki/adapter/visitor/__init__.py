"""Visitor identity resolution."""

from .resolver import IpLookupVisitorIdentityResolver, RequestVisitorIdentityResolver

__all__ = ["IpLookupVisitorIdentityResolver", "RequestVisitorIdentityResolver"]
