"""Request validators."""
from splitledger.utils.errors import InvalidRecord


def json_object(payload):
    """The request body as a dict; anything else is an invalid record."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise InvalidRecord("Request body must be a JSON object")
    return dict(payload)
