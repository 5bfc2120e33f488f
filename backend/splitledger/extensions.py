import logging

from pymongo import MongoClient

logger = logging.getLogger(__name__)


def init_mongo(app):
    """Connect to MONGO_URI and return the database."""
    client = MongoClient(app.config["MONGO_URI"])

    # get_default_database() needs a database name in the URI
    # (e.g. mongodb://host/splitledger); otherwise use MONGO_DB_NAME
    db = client.get_default_database(default=app.config.get("MONGO_DB_NAME"))

    logger.info("[MongoDB] Connected to database: %s", db.name)
    return db


def get_ledger_service():
    """The LedgerService bound to the current app."""
    from flask import current_app
    return current_app.extensions["ledger_service"]
