# splitledger/expenses/routes.py

import uuid

from flask import Blueprint, Response, request, jsonify

from splitledger.analytics.filters import DateFilter
from splitledger.analytics.services import category_totals
from splitledger.expenses.models import Expense
from splitledger.exports.csv_export import export_expenses_csv, export_filename
from splitledger.extensions import get_ledger_service
from splitledger.utils.errors import InvalidRecord
from splitledger.utils.money import round_currency
from splitledger.utils.validators import json_object

expenses_bp = Blueprint("expenses", __name__)


def _date_filter():
    try:
        return DateFilter.from_query(request.args)
    except ValueError as e:
        raise InvalidRecord(str(e))


@expenses_bp.route("/", methods=["GET"])
def list_expenses():
    snap = get_ledger_service().snapshot(_date_filter())
    return jsonify({"expenses": [e.to_dict() for e in snap.expenses]})


@expenses_bp.route("/", methods=["POST"])
def add_expense():
    """
    Add an expense split evenly among the listed participants.

    Request body:
    {
        "amount": 90.00,
        "payer_id": "alice",
        "split_among": ["alice", "bob", "carol"],
        "date": "2024-05-01",
        "category_id": "food",     // optional
        "description": "Dinner"    // optional
    }
    """
    data = json_object(request.get_json(silent=True))
    data.setdefault("id", str(uuid.uuid4()))

    expense = get_ledger_service().add_expense(Expense.from_dict(data))
    return jsonify({"expense": expense.to_dict()}), 201


@expenses_bp.route("/<expense_id>", methods=["PUT"])
def update_expense(expense_id):
    """Replace an expense; the body has the same fields as POST."""
    data = json_object(request.get_json(silent=True))
    data["id"] = expense_id

    expense = get_ledger_service().update_expense(Expense.from_dict(data))
    return jsonify({"expense": expense.to_dict()})


@expenses_bp.route("/<expense_id>", methods=["DELETE"])
def delete_expense(expense_id):
    get_ledger_service().delete_expense(expense_id)
    return jsonify({"deleted": expense_id})


@expenses_bp.route("/categories", methods=["GET"])
def get_category_totals():
    snap = get_ledger_service().snapshot(_date_filter())
    totals = category_totals(snap.expenses)
    return jsonify({
        "categories": {cid: float(round_currency(t)) for cid, t in totals.items()}
    })


@expenses_bp.route("/export", methods=["GET"])
def export_csv():
    """Download the (optionally date filtered) expenses as CSV."""
    service = get_ledger_service()
    snap = service.snapshot(_date_filter())
    categories = service.repository.categories.list()

    content = export_expenses_csv(
        snap.expenses,
        category_names={c.id: c.name for c in categories},
        user_names={p.id: p.display_name for p in snap.participants},
    )
    return Response(
        content,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )
