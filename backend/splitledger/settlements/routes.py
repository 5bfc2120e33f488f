"""Settlement routes for Splitwise-style expense settling."""
from flask import Blueprint, request, jsonify

from splitledger.analytics.filters import DateFilter
from splitledger.extensions import get_ledger_service
from splitledger.expenses.models import parse_date
from splitledger.settlements.models import Settlement
from splitledger.utils.errors import InvalidRecord
from splitledger.utils.validators import json_object
from splitledger.utils.money import round_currency

bp = Blueprint("settlements", __name__)


def _date_filter():
    try:
        return DateFilter.from_query(request.args)
    except ValueError as e:
        raise InvalidRecord(str(e))


@bp.route("/balances", methods=["GET"])
def get_balances():
    """
    Net balance of every participant.

    Returns:
    {
        "balances": {"alice": 60.00, "bob": -30.00, "carol": -30.00}
    }

    Positive balance = is owed money
    Negative balance = owes money
    """
    balances = get_ledger_service().balances(_date_filter())
    return jsonify({
        "balances": {pid: float(round_currency(b)) for pid, b in balances.items()}
    })


@bp.route("/debts", methods=["GET"])
def get_debts():
    """
    Calculate who owes whom.
    Minimizes the number of transactions needed.

    Returns:
    {
        "debts": [{"from_id": "bob", "to_id": "alice", "amount": 30.00}],
        "total_owed": 30.00
    }
    """
    settlements = get_ledger_service().settlements(_date_filter())
    total_owed = sum(s.amount for s in settlements)
    return jsonify({
        "debts": [s.to_dict() for s in settlements],
        "total_owed": float(round_currency(total_owed)),
    })


@bp.route("/settle", methods=["POST"])
def record_settlement():
    """
    Record that a suggested settlement was paid.

    Request body:
    {
        "from_id": "bob",
        "to_id": "alice",
        "amount": 30.00,
        "date": "2024-05-01",      // optional
        "description": "..."      // optional
    }
    """
    data = json_object(request.get_json(silent=True))

    from_id = data.get("from_id")
    to_id = data.get("to_id")
    amount = data.get("amount")

    if not all([from_id, to_id, amount]):
        return jsonify({"error": "Missing required fields"}), 400

    try:
        settlement = Settlement(from_id=str(from_id), to_id=str(to_id), amount=amount)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    payment = get_ledger_service().record_settlement(
        settlement,
        paid_on=parse_date(data.get("date")),
        description=data.get("description"),
    )
    return jsonify({"payment": payment.to_dict()}), 201


@bp.route("/summary/<participant_id>", methods=["GET"])
def get_summary(participant_id):
    """Balance, amount owed and amount lent for one participant."""
    summary = get_ledger_service().user_summary(participant_id, _date_filter())
    return jsonify({
        "participant_id": participant_id,
        "balance": float(round_currency(summary["balance"])),
        "owed": float(round_currency(summary["owed"])),
        "lent": float(round_currency(summary["lent"])),
    })
