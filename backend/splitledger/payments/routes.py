"""Payment routes: cash already exchanged between participants."""
import uuid

from flask import Blueprint, request, jsonify

from splitledger.analytics.filters import DateFilter
from splitledger.extensions import get_ledger_service
from splitledger.payments.models import Payment
from splitledger.utils.errors import InvalidRecord
from splitledger.utils.validators import json_object

bp = Blueprint("payments", __name__)


@bp.route("/", methods=["GET"])
def list_payments():
    try:
        date_filter = DateFilter.from_query(request.args)
    except ValueError as e:
        raise InvalidRecord(str(e))
    snap = get_ledger_service().snapshot(date_filter)
    return jsonify({"payments": [p.to_dict() for p in snap.payments]})


@bp.route("/", methods=["POST"])
def add_payment():
    """
    Record a payment.

    Request body:
    {
        "from_id": "bob",
        "to_id": "alice",
        "amount": 30.00,
        "date": "2024-05-01",
        "description": "Paid back for dinner"   // optional
    }
    """
    data = json_object(request.get_json(silent=True))
    data.setdefault("id", str(uuid.uuid4()))

    payment = get_ledger_service().add_payment(Payment.from_dict(data))
    return jsonify({"payment": payment.to_dict()}), 201
