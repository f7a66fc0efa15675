"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class VisitorLookupError(AdapterError):
    """The visitor identity service gave no usable answer."""

    def __init__(self, reason: str, url: str | None = None):
        self.reason = reason
        self.url = url
        super().__init__(f"{reason} ({url})" if url else reason)
