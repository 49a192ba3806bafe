"""Infrastructure providers."""

# Import bases
from .network import NetworkProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .network import ProdNetworkProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "NetworkProvider",
    "PersistenceProvider",
    "ProdNetworkProvider",
    "ProdPersistenceProvider",
]
