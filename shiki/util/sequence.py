"""Request generation tokens for discarding stale responses."""


class RequestSequence:
    """Monotonic counter of issued requests.

    Each fetch takes a token from ``issue``. When its response arrives, the
    response is applied only if ``is_current(token)``; anything older was
    overtaken by a later request and is dropped.
    """

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        """Issue the token for a new request."""
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        """Whether ``token`` belongs to the most recently issued request."""
        return token == self._latest
