"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or invalid input, raised before anything reaches the store.

    Carries the offending field so callers can show an inline message.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """The backing store failed (network fault, timeout or rejection).

    Retrying the same operation is safe. Details stay in the logs; users only
    see a generic notice.
    """

    def __init__(self, operation: str, detail: str = "", retryable: bool = True):
        self.operation = operation
        self.detail = detail
        self.retryable = retryable
        message = f"Store operation failed: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
