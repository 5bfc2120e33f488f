from splitledger.storage.base import EntityStore, Repository
from splitledger.storage.memory import InMemoryRepository, InMemoryStore

__all__ = ["EntityStore", "Repository", "InMemoryRepository", "InMemoryStore"]
