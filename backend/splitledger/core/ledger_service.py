"""
Ledger Service - Glue between the persistence collaborator and the engine.

Responsibilities:
- Load a consistent snapshot of participants, expenses and payments
- Run balance and settlement calculations on that snapshot
- Validate and store expenses, categories and payments
- Turn an accepted settlement into a recorded Payment
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from splitledger.analytics.filters import DateFilter, filter_by_date
from splitledger.core.balance_service import BalanceService
from splitledger.utils.errors import InvalidRecord
from splitledger.utils.money import EPSILON
from splitledger.expenses.models import Expense
from splitledger.payments.models import Payment
from splitledger.settlements.models import Settlement
from splitledger.settlements.services import SettlementCalculator
from splitledger.storage.base import Repository
from splitledger.users.model import Category, Participant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerSnapshot:
    participants: List[Participant]
    expenses: List[Expense]
    payments: List[Payment]

    @property
    def participant_ids(self) -> List[str]:
        return [p.id for p in self.participants]


class LedgerService:
    """Service for ledger reads and writes over an injected repository."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def snapshot(
        self,
        date_filter: Optional[DateFilter] = None,
        today: Optional[date] = None,
    ) -> LedgerSnapshot:
        """Load every record once; the date filter applies to expenses and payments."""
        return LedgerSnapshot(
            participants=self.repository.participants.list(),
            expenses=filter_by_date(self.repository.expenses.list(), date_filter, today),
            payments=filter_by_date(self.repository.payments.list(), date_filter, today),
        )

    def balances(self, date_filter: Optional[DateFilter] = None) -> Dict[str, Decimal]:
        snap = self.snapshot(date_filter)
        return BalanceService.compute_balances(
            snap.expenses, snap.participant_ids, snap.payments
        )

    def settlements(self, date_filter: Optional[DateFilter] = None) -> List[Settlement]:
        return SettlementCalculator.simplify(self.balances(date_filter))

    def user_summary(
        self,
        participant_id: str,
        date_filter: Optional[DateFilter] = None,
    ) -> Dict[str, Any]:
        """Balance, amount owed and amount lent for one participant."""
        snap = self.snapshot(date_filter)
        return {
            "participant_id": participant_id,
            "balance": BalanceService.balance_of(participant_id, snap.expenses, snap.payments),
            "owed": BalanceService.total_owed_by(participant_id, snap.expenses),
            "lent": BalanceService.total_lent_by(participant_id, snap.expenses),
        }

    def add_expense(self, expense: Expense) -> Expense:
        expense.validate()
        return self.repository.expenses.create(expense)

    def update_expense(self, expense: Expense) -> Expense:
        """Replace a stored expense. Raises RecordNotFound for an unknown id."""
        expense.validate()
        return self.repository.expenses.update(expense)

    def delete_expense(self, expense_id: str) -> None:
        self.repository.expenses.delete(expense_id)
        logger.info("Deleted expense %s", expense_id)

    def add_category(self, category: Category) -> Category:
        category.validate()
        return self.repository.categories.create(category)

    def update_category(self, category: Category) -> Category:
        category.validate()
        return self.repository.categories.update(category)

    def delete_category(self, category_id: str) -> None:
        self.repository.categories.delete(category_id)

    def add_payment(self, payment: Payment) -> Payment:
        payment.validate()
        return self.repository.payments.create(payment)

    def record_settlement(
        self,
        settlement: Settlement,
        paid_on: Optional[date] = None,
        description: Optional[str] = None,
    ) -> Payment:
        """
        Record that a settlement was paid.

        Args:
            settlement: The suggested transfer that was executed
            paid_on: When it was paid, defaults to today
            description: Free text stored on the payment

        Returns:
            The created Payment

        Raises:
            InvalidRecord: If the amount is within EPSILON of zero or the
                payer and payee are the same
        """
        if settlement.amount <= EPSILON:
            raise InvalidRecord(f"Settlement amount too small: {settlement.amount}")
        payment = settlement.to_payment(
            payment_id=str(uuid.uuid4()),
            date=paid_on or date.today(),
            description=description,
        )
        payment = self.add_payment(payment)
        logger.info(
            "Recorded settlement %s -> %s: %s",
            payment.from_id, payment.to_id, payment.amount,
        )
        return payment
