"""
Persistence collaborator interface.

The ledger engine never touches storage. A Repository is handed to the
LedgerService, which loads a snapshot and passes plain records to the
pure balance and settlement functions.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class EntityStore(ABC, Generic[T]):
    """CRUD access to one entity type."""

    @abstractmethod
    def list(self) -> List[T]:
        ...

    @abstractmethod
    def get(self, record_id: str) -> T:
        """Raises RecordNotFound when the id is unknown."""

    @abstractmethod
    def create(self, record: T) -> T:
        ...

    @abstractmethod
    def update(self, record: T) -> T:
        """Raises RecordNotFound when the id is unknown."""

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Raises RecordNotFound when the id is unknown."""


class Repository(ABC):
    """One store per entity type."""

    participants: EntityStore
    categories: EntityStore
    expenses: EntityStore
    payments: EntityStore
