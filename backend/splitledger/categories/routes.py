"""Category routes: names and colours shown next to expenses."""
import uuid

from flask import Blueprint, request, jsonify

from splitledger.extensions import get_ledger_service
from splitledger.users.model import Category
from splitledger.utils.validators import json_object

bp = Blueprint("categories", __name__)


@bp.route("/", methods=["GET"])
def list_categories():
    categories = get_ledger_service().repository.categories.list()
    return jsonify({"categories": [c.to_dict() for c in categories]})


@bp.route("/", methods=["POST"])
def add_category():
    """
    Create a category.

    Request body:
    {
        "name": "Food & Dining",
        "color": "#ff6b6b"    // optional
    }
    """
    data = json_object(request.get_json(silent=True))
    data.setdefault("id", str(uuid.uuid4()))

    category = get_ledger_service().add_category(Category.from_dict(data))
    return jsonify({"category": category.to_dict()}), 201


@bp.route("/<category_id>", methods=["PUT"])
def update_category(category_id):
    data = json_object(request.get_json(silent=True))
    data["id"] = category_id

    category = get_ledger_service().update_category(Category.from_dict(data))
    return jsonify({"category": category.to_dict()})


@bp.route("/<category_id>", methods=["DELETE"])
def delete_category(category_id):
    """Expenses keep their category_id; exports show it as Unknown."""
    get_ledger_service().delete_category(category_id)
    return jsonify({"deleted": category_id})
