"""Settlement calculation service - Splitwise-style debt minimization."""
import logging
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping

from splitledger.utils.money import EPSILON, Number, to_decimal
from splitledger.settlements.models import Settlement

logger = logging.getLogger(__name__)


class SettlementCalculator:
    """Turn net balances into a short list of direct payments."""

    @staticmethod
    def simplify(balances: Mapping[str, Number]) -> List[Settlement]:
        """
        Calculate who pays whom using a greedy algorithm to minimize transactions.

        The largest creditor is matched against the largest debtor until one
        side is exhausted, then the cursor on that side moves on. Equal
        magnitudes are ordered by participant id so the output is
        deterministic. Balances within EPSILON of zero are treated as settled
        and never appear in a settlement.

        Returns at most ``creditors + debtors - 1`` settlements.
        """
        creditors = []  # People who are OWED money
        debtors = []    # People who OWE money

        for participant_id, balance in balances.items():
            balance = to_decimal(balance)
            if balance > EPSILON:
                creditors.append({"id": participant_id, "amount": balance})
            elif balance < -EPSILON:
                debtors.append({"id": participant_id, "amount": -balance})

        creditors.sort(key=lambda x: (-x["amount"], x["id"]))
        debtors.sort(key=lambda x: (-x["amount"], x["id"]))

        settlements = []
        c = d = 0

        while c < len(creditors) and d < len(debtors):
            creditor = creditors[c]
            debtor = debtors[d]

            amount = min(creditor["amount"], debtor["amount"])
            if amount > EPSILON:
                settlements.append(Settlement(
                    from_id=debtor["id"],
                    to_id=creditor["id"],
                    amount=amount,
                ))

            creditor["amount"] -= amount
            debtor["amount"] -= amount

            if creditor["amount"] <= EPSILON:
                c += 1
            if debtor["amount"] <= EPSILON:
                d += 1

        logger.debug(
            "Simplified %d creditors and %d debtors into %d settlements",
            len(creditors), len(debtors), len(settlements),
        )
        return settlements

    @staticmethod
    def apply_settlements(
        balances: Mapping[str, Number],
        settlements: Iterable[Settlement],
    ) -> Dict[str, Decimal]:
        """
        Balances after every settlement was paid.

        Paying raises the debtor's balance and lowers the creditor's, the
        same way a recorded Payment does.
        """
        result = OrderedDict((k, to_decimal(v)) for k, v in balances.items())
        for s in settlements:
            result[s.from_id] = result.get(s.from_id, Decimal(0)) + s.amount
            result[s.to_id] = result.get(s.to_id, Decimal(0)) - s.amount
        return result


simplify = SettlementCalculator.simplify
apply_settlements = SettlementCalculator.apply_settlements
