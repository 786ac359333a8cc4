from .catalog import InMemoryCatalogStore
from .users import InMemoryUserRegistry

__all__ = ["InMemoryCatalogStore", "InMemoryUserRegistry"]
