from socialq.stores.base import RelationshipStore
from socialq.stores.local import LocalStore

__all__ = ["LocalStore", "RelationshipStore"]
