from statements.stores.interfaces import CategoryCatalog
from statements.stores.memory_store import InMemoryCategoryCatalog

__all__ = ["CategoryCatalog", "InMemoryCategoryCatalog"]
