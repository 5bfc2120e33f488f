"""
Balance Service - Net positions derived from expenses and payments.

Responsibilities:
- Compute a net balance for every participant of a ledger
- Project a single participant's balance, amount owed and amount lent

Positive balance = the group owes this participant.
Negative balance = this participant owes the group.

Balances are recomputed from the records on every call; nothing is cached.
Accumulation is exact (Fraction) and results are full-precision Decimals.
"""
import logging
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from typing import Dict, Iterable, Optional, Sequence

from splitledger.utils.money import fraction_to_decimal
from splitledger.expenses.models import Expense
from splitledger.payments.models import Payment

logger = logging.getLogger(__name__)


class BalanceService:
    """Pure balance calculations over in-memory records."""

    @classmethod
    def compute_balances(
        cls,
        expenses: Iterable[Expense],
        participants: Sequence[str] = (),
        payments: Optional[Iterable[Payment]] = None,
    ) -> Dict[str, Decimal]:
        """
        Compute the net balance of every participant.

        Every roster member appears in the result, at zero if inactive.
        Identifiers that only show up in expense or payment data are added
        after the roster rather than dropped.

        Args:
            expenses: Expense records
            participants: Declared roster of participant ids
            payments: Payment records already executed

        Returns:
            Ordered dict of {participant_id: balance}

        Raises:
            InvalidRecord: For an expense with an empty split or a
                non-positive amount, or an invalid payment
        """
        roster = list(participants)
        totals: Dict[str, Fraction] = OrderedDict()
        for participant_id in roster:
            totals.setdefault(participant_id, Fraction(0))

        expense_count = 0
        for expense in expenses:
            cls._apply_expense(totals, expense)
            expense_count += 1

        payment_count = 0
        for payment in payments or ():
            cls._apply_payment(totals, payment)
            payment_count += 1

        known = set(roster)
        unknown = [p for p in totals if p not in known]
        if unknown:
            logger.debug("Participants outside the roster: %s", unknown)
        logger.debug(
            "Computed %d balances from %d expenses and %d payments",
            len(totals), expense_count, payment_count,
        )
        return OrderedDict(
            (participant_id, fraction_to_decimal(total))
            for participant_id, total in totals.items()
        )

    @classmethod
    def balance_of(
        cls,
        participant_id: str,
        expenses: Iterable[Expense],
        payments: Optional[Iterable[Payment]] = None,
    ) -> Decimal:
        """Net balance of one participant, without building the full map."""
        total = Fraction(0)
        for expense in expenses:
            share = expense.share
            if expense.payer_id == participant_id:
                total += Fraction(expense.amount)
            if participant_id in expense.split_among:
                total -= share
        for payment in payments or ():
            payment.validate()
            if payment.from_id == participant_id:
                total += Fraction(payment.amount)
            if payment.to_id == participant_id:
                total -= Fraction(payment.amount)
        return fraction_to_decimal(total)

    @classmethod
    def total_owed_by(cls, participant_id: str, expenses: Iterable[Expense]) -> Decimal:
        """Sum of the participant's shares in expenses someone else paid."""
        total = Fraction(0)
        for expense in expenses:
            if participant_id in expense.split_among and expense.payer_id != participant_id:
                total += expense.share
        return fraction_to_decimal(total)

    @classmethod
    def total_lent_by(cls, participant_id: str, expenses: Iterable[Expense]) -> Decimal:
        """
        Amount the participant fronted on behalf of others.

        For each expense they paid, the shares of every split member other
        than themselves. A payer outside the split fronted the whole amount.
        """
        total = Fraction(0)
        for expense in expenses:
            if expense.payer_id != participant_id:
                continue
            others = len(expense.split_among - {participant_id})
            total += expense.share * others
        return fraction_to_decimal(total)

    @staticmethod
    def _apply_expense(totals: Dict[str, Fraction], expense: Expense) -> None:
        share = expense.share
        totals[expense.payer_id] = totals.get(expense.payer_id, Fraction(0)) + Fraction(expense.amount)
        for member in sorted(expense.split_among):
            totals[member] = totals.get(member, Fraction(0)) - share

    @staticmethod
    def _apply_payment(totals: Dict[str, Fraction], payment: Payment) -> None:
        payment.validate()
        amount = Fraction(payment.amount)
        totals[payment.from_id] = totals.get(payment.from_id, Fraction(0)) + amount
        totals[payment.to_id] = totals.get(payment.to_id, Fraction(0)) - amount


compute_balances = BalanceService.compute_balances
balance_of = BalanceService.balance_of
total_owed_by = BalanceService.total_owed_by
total_lent_by = BalanceService.total_lent_by
