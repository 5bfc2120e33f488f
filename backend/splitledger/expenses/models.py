"""Expense models."""
from dataclasses import dataclass
from datetime import date as date_type, datetime
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from splitledger.utils.errors import InvalidRecord
from splitledger.utils.money import round_currency, to_decimal

DEFAULT_CATEGORY = "general"


def parse_date(value: Union[str, date_type, datetime, None]) -> Optional[date_type]:
    """Accept a date, a datetime or an ISO string; return a date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    text = str(value).strip()
    try:
        return date_type.fromisoformat(text[:10])
    except ValueError:
        raise InvalidRecord(f"Invalid date: {value!r}")


@dataclass(frozen=True)
class Expense:
    """A cost paid by one participant and split evenly among ``split_among``."""
    id: str
    amount: Decimal
    payer_id: str
    split_among: FrozenSet[str]
    date: Optional[date_type] = None
    category_id: str = DEFAULT_CATEGORY
    description: str = ""

    def __post_init__(self):
        try:
            amount = to_decimal(self.amount)
        except ValueError as e:
            raise InvalidRecord(f"Expense {self.id}: {e}")
        object.__setattr__(self, "amount", amount)
        if isinstance(self.split_among, str):
            members = frozenset([self.split_among])
        else:
            members = frozenset(self.split_among or ())
        object.__setattr__(self, "split_among", members)
        object.__setattr__(self, "date", parse_date(self.date))

    def validate(self) -> "Expense":
        if self.amount <= 0:
            raise InvalidRecord(
                f"Expense {self.id}: amount must be positive, got {self.amount}"
            )
        if not self.split_among:
            raise InvalidRecord(f"Expense {self.id}: split_among must not be empty")
        return self

    @property
    def share(self) -> Fraction:
        """Exact per-member share of the amount."""
        self.validate()
        return Fraction(self.amount) / len(self.split_among)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "amount": float(round_currency(self.amount)),
            "payer_id": self.payer_id,
            "split_among": sorted(self.split_among),
            "date": self.date.isoformat() if self.date else None,
            "category_id": self.category_id,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Expense":
        missing = [k for k in ("id", "amount", "payer_id", "split_among") if k not in data]
        if missing:
            raise InvalidRecord(f"Expense is missing keys: {missing}")
        return cls(
            id=str(data["id"]),
            amount=data["amount"],
            payer_id=str(data["payer_id"]),
            split_among=_as_members(data["split_among"]),
            date=data.get("date"),
            category_id=data.get("category_id") or DEFAULT_CATEGORY,
            description=data.get("description") or "",
        )


def _as_members(value: Union[str, Iterable[str]]) -> FrozenSet[str]:
    if isinstance(value, str):
        return frozenset([value])
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidRecord(f"split_among must be a list of participant ids, got {value!r}")
    return frozenset(str(v) for v in value)
