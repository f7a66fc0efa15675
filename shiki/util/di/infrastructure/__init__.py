"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .visitor import VisitorProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .visitor import ProdVisitorProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdVisitorProvider",
    "VisitorProvider",
]
