"""
MongoDB repository.

One collection per entity type; the record id is stored as ``_id``.
Amounts are stored as strings so Decimal values survive the round trip.
"""
import logging
from typing import Any, Callable, Dict, List

from pymongo.errors import DuplicateKeyError

from splitledger.utils.errors import InvalidRecord, RecordNotFound
from splitledger.expenses.models import Expense
from splitledger.payments.models import Payment
from splitledger.storage.base import EntityStore, Repository, T
from splitledger.users.model import Category, Participant

logger = logging.getLogger(__name__)


class MongoStore(EntityStore[T]):

    def __init__(self, collection, name: str, from_dict: Callable[[Dict[str, Any]], T]):
        self.collection = collection
        self.name = name
        self._from_dict = from_dict

    def list(self) -> List[T]:
        return [self._to_record(doc) for doc in self.collection.find()]

    def get(self, record_id: str) -> T:
        doc = self.collection.find_one({"_id": record_id})
        if not doc:
            raise RecordNotFound(f"{self.name} {record_id} not found")
        return self._to_record(doc)

    def create(self, record: T) -> T:
        try:
            self.collection.insert_one(self._to_document(record))
        except DuplicateKeyError:
            raise InvalidRecord(f"{self.name} {record.id} already exists")
        logger.debug("[MongoDB] Created %s %s", self.name, record.id)
        return record

    def update(self, record: T) -> T:
        doc = self._to_document(record)
        result = self.collection.replace_one({"_id": record.id}, doc)
        if result.matched_count == 0:
            raise RecordNotFound(f"{self.name} {record.id} not found")
        return record

    def delete(self, record_id: str) -> None:
        result = self.collection.delete_one({"_id": record_id})
        if result.deleted_count == 0:
            raise RecordNotFound(f"{self.name} {record_id} not found")

    def _to_document(self, record: T) -> Dict[str, Any]:
        doc = record.to_dict()
        doc["_id"] = doc.pop("id")
        if "amount" in doc:
            doc["amount"] = str(record.amount)
        return doc

    def _to_record(self, doc: Dict[str, Any]) -> T:
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return self._from_dict(data)


class MongoRepository(Repository):

    def __init__(self, db):
        self.participants = MongoStore(db.participants, "Participant", Participant.from_dict)
        self.categories = MongoStore(db.categories, "Category", Category.from_dict)
        self.expenses = MongoStore(db.expenses, "Expense", Expense.from_dict)
        self.payments = MongoStore(db.payments, "Payment", Payment.from_dict)
