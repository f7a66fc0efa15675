"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .visitor import MockVisitorProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockVisitorProvider",
    "build_test_container",
]
