"""Settlement models."""
from dataclasses import dataclass
from datetime import date as date_type
from decimal import Decimal
from typing import Any, Dict, Optional

from splitledger.utils.money import round_currency, to_decimal
from splitledger.payments.models import Payment


@dataclass(frozen=True)
class Settlement:
    """Suggested transfer: ``from_id`` should pay ``to_id`` ``amount``.

    Settlements are never stored. Acting on one means recording a Payment.
    """
    from_id: str
    to_id: str
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", to_decimal(self.amount))

    def to_payment(
        self,
        payment_id: str,
        date: Optional[date_type] = None,
        description: Optional[str] = None,
    ) -> Payment:
        return Payment(
            id=payment_id,
            from_id=self.from_id,
            to_id=self.to_id,
            amount=round_currency(self.amount),
            date=date,
            description=description or "Settlement",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from_id": self.from_id,
            "to_id": self.to_id,
            "amount": float(round_currency(self.amount)),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settlement":
        return cls(
            from_id=str(data["from_id"]),
            to_id=str(data["to_id"]),
            amount=data["amount"],
        )
