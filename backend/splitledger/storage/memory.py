"""In-memory repository, used by tests and when no MONGO_URI is configured."""
import threading
from collections import OrderedDict
from typing import Iterable, List, Optional

from splitledger.utils.errors import InvalidRecord, RecordNotFound
from splitledger.expenses.models import Expense
from splitledger.payments.models import Payment
from splitledger.storage.base import EntityStore, Repository, T
from splitledger.users.model import Category, Participant


class InMemoryStore(EntityStore[T]):

    def __init__(self, name: str, records: Optional[Iterable[T]] = None):
        self.name = name
        self._records = OrderedDict()
        self._lock = threading.Lock()
        for record in records or ():
            self._records[record.id] = record

    def list(self) -> List[T]:
        with self._lock:
            return list(self._records.values())

    def get(self, record_id: str) -> T:
        with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                raise RecordNotFound(f"{self.name} {record_id} not found")

    def create(self, record: T) -> T:
        with self._lock:
            if record.id in self._records:
                raise InvalidRecord(f"{self.name} {record.id} already exists")
            self._records[record.id] = record
        return record

    def update(self, record: T) -> T:
        with self._lock:
            if record.id not in self._records:
                raise RecordNotFound(f"{self.name} {record.id} not found")
            self._records[record.id] = record
        return record

    def delete(self, record_id: str) -> None:
        with self._lock:
            if record_id not in self._records:
                raise RecordNotFound(f"{self.name} {record_id} not found")
            del self._records[record_id]


class InMemoryRepository(Repository):

    def __init__(
        self,
        participants: Iterable[Participant] = (),
        categories: Iterable[Category] = (),
        expenses: Iterable[Expense] = (),
        payments: Iterable[Payment] = (),
    ):
        self.participants = InMemoryStore("Participant", participants)
        self.categories = InMemoryStore("Category", categories)
        self.expenses = InMemoryStore("Expense", expenses)
        self.payments = InMemoryStore("Payment", payments)
