"""Mock providers for testing."""

from .network import MockNetworkProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNetworkProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
