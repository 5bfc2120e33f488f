"""
Payment models.

A Payment is cash that already moved between two participants outside the
app, typically a debtor reimbursing a creditor after a settlement was
suggested.
"""
from dataclasses import dataclass
from datetime import date as date_type
from decimal import Decimal
from typing import Any, Dict, Optional

from splitledger.utils.errors import InvalidRecord
from splitledger.utils.money import round_currency, to_decimal
from splitledger.expenses.models import parse_date


@dataclass(frozen=True)
class Payment:
    id: str
    from_id: str
    to_id: str
    amount: Decimal
    date: Optional[date_type] = None
    description: str = ""

    def __post_init__(self):
        try:
            amount = to_decimal(self.amount)
        except ValueError as e:
            raise InvalidRecord(f"Payment {self.id}: {e}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "date", parse_date(self.date))

    def validate(self) -> "Payment":
        if self.amount <= 0:
            raise InvalidRecord(
                f"Payment {self.id}: amount must be positive, got {self.amount}"
            )
        if self.from_id == self.to_id:
            raise InvalidRecord(f"Payment {self.id}: payer and payee are the same")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "from_id": self.from_id,
            "to_id": self.to_id,
            "amount": float(round_currency(self.amount)),
            "date": self.date.isoformat() if self.date else None,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Payment":
        missing = [k for k in ("id", "from_id", "to_id", "amount") if k not in data]
        if missing:
            raise InvalidRecord(f"Payment is missing keys: {missing}")
        return cls(
            id=str(data["id"]),
            from_id=str(data["from_id"]),
            to_id=str(data["to_id"]),
            amount=data["amount"],
            date=data.get("date"),
            description=data.get("description") or "",
        )
