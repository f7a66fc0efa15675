"""Visitor identity resolution interface."""

from shiki.domain.value import VisitorId


class VisitorIdentityResolver:
    """Best-effort resolver of the current visitor's identity.

    Implementations never raise: when the identity cannot be determined they
    return ``VisitorId.unknown()``.
    """

    async def resolve(self, hint: str | None = None) -> VisitorId:
        """Resolve the visitor identity.

        Args:
            hint: Identity already known to the caller (e.g. the client
                address of the current request), used when present

        Returns:
            Visitor identity, or the unknown sentinel
        """
        raise NotImplementedError
