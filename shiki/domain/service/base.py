"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the rules that span a repository call: validation before
    writes, status transitions and counter bookkeeping.
    """

    pass
