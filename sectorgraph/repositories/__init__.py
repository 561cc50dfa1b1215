from .relationship_store import InMemoryRelationshipStore

__all__ = [
    "InMemoryRelationshipStore",
]
