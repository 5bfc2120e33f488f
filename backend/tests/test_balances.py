"""
Balance calculator tests.

Checks:
1. Equal-split credit and debit amounts
2. Payments move balances like inverse obligations
3. Roster members without activity and ids outside the roster
4. Invalid records are rejected instead of producing NaN
"""
from datetime import date
from decimal import Decimal

import pytest

from splitledger.core import InvalidRecord, compute_balances
from splitledger.expenses.models import Expense
from splitledger.payments.models import Payment


class TestEqualSplit:

    def test_hundred_split_four_ways(self) -> None:
        members = ["a", "b", "c", "d"]
        expense = Expense(id="e", amount=100, payer_id="a", split_among=members)
        balances = compute_balances([expense], members)
        assert balances["a"] == Decimal("75")
        for member in ["b", "c", "d"]:
            assert balances[member] == Decimal("-25")

    def test_payer_outside_split_gets_full_credit(self) -> None:
        expense = Expense(id="e", amount=100, payer_id="x", split_among=["a", "b", "c", "d"])
        balances = compute_balances([expense], ["x", "a", "b", "c", "d"])
        assert balances["x"] == Decimal("100")
        assert balances["a"] == Decimal("-25")

    def test_duplicate_split_members_count_once(self) -> None:
        expense = Expense(id="e", amount=30, payer_id="a", split_among=["a", "b", "b", "c"])
        balances = compute_balances([expense], ["a", "b", "c"])
        assert balances["b"] == Decimal("-10")
        assert balances["a"] == Decimal("20")

    def test_thirds_sum_to_zero(self) -> None:
        expense = Expense(id="e", amount="10.00", payer_id="a", split_among=["a", "b", "c"])
        balances = compute_balances([expense], ["a", "b", "c"])
        assert abs(sum(balances.values())) < Decimal("1e-6")
        assert abs(balances["b"] + Decimal("3.3333333333")) < Decimal("1e-9")


class TestScenarios:

    def test_scenario_a(self, dinner, roster) -> None:
        balances = compute_balances([dinner], roster)
        assert balances == {
            "alice": Decimal("60"),
            "bob": Decimal("-30"),
            "carol": Decimal("-30"),
        }

    def test_scenario_b_payment_reduces_debt(self, dinner, roster) -> None:
        payment = Payment(id="p1", from_id="bob", to_id="alice", amount=30, date=date(2024, 5, 2))
        balances = compute_balances([dinner], roster, [payment])
        assert balances["alice"] == Decimal("30")
        assert balances["bob"] == Decimal("0")
        assert balances["carol"] == Decimal("-30")

    def test_scenario_d_idle_roster_member(self, dinner) -> None:
        balances = compute_balances([dinner], ["alice", "bob", "carol", "dave"])
        assert balances["dave"] == Decimal("0")


class TestRoster:

    def test_empty_input(self) -> None:
        assert compute_balances([], []) == {}

    def test_roster_order_is_kept(self, dinner) -> None:
        balances = compute_balances([dinner], ["carol", "bob", "alice"])
        assert list(balances) == ["carol", "bob", "alice"]

    def test_unknown_participants_are_included(self, dinner) -> None:
        payment = Payment(id="p", from_id="erin", to_id="alice", amount=5)
        balances = compute_balances([dinner], ["alice"], [payment])
        assert set(balances) == {"alice", "bob", "carol", "erin"}
        assert balances["erin"] == Decimal("5")
        assert balances["alice"] == Decimal("55")

    def test_payments_default_to_none(self, dinner, roster) -> None:
        assert compute_balances([dinner], roster) == compute_balances([dinner], roster, [])


class TestInvalidRecords:

    def test_empty_split_rejected(self) -> None:
        expense = Expense(id="e", amount=10, payer_id="a", split_among=[])
        with pytest.raises(InvalidRecord):
            compute_balances([expense], ["a"])

    @pytest.mark.parametrize("amount", [0, -5, "-0.01"])
    def test_non_positive_amount_rejected(self, amount) -> None:
        expense = Expense(id="e", amount=amount, payer_id="a", split_among=["a", "b"])
        with pytest.raises(InvalidRecord):
            compute_balances([expense], ["a", "b"])

    def test_non_numeric_amount_rejected(self) -> None:
        with pytest.raises(InvalidRecord):
            Expense(id="e", amount="ten", payer_id="a", split_among=["a"])

    def test_nan_amount_rejected(self) -> None:
        with pytest.raises(InvalidRecord):
            Expense(id="e", amount=float("nan"), payer_id="a", split_among=["a"])

    def test_invalid_payment_rejected(self) -> None:
        payment = Payment(id="p", from_id="a", to_id="b", amount=0)
        with pytest.raises(InvalidRecord):
            compute_balances([], ["a", "b"], [payment])

    def test_invalid_record_is_a_value_error(self) -> None:
        assert issubclass(InvalidRecord, ValueError)
