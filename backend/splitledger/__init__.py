import logging

from flask import Flask, jsonify
from flask_cors import CORS

from splitledger.config import Config
from splitledger.core.ledger_service import LedgerService
from splitledger.extensions import init_mongo
from splitledger.utils.errors import InvalidRecord, RecordNotFound

logger = logging.getLogger(__name__)


def create_app(config_class=Config, repository=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Disable strict slashes to prevent 308 redirects that break CORS preflight
    app.url_map.strict_slashes = False

    # Allow the frontend to talk to Flask
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if repository is None:
        repository = _build_repository(app)
    app.extensions["ledger_service"] = LedgerService(repository)

    from splitledger.categories.routes import bp as categories_bp
    from splitledger.expenses.routes import expenses_bp
    from splitledger.payments.routes import bp as payments_bp
    from splitledger.settlements.routes import bp as settlements_bp

    app.register_blueprint(expenses_bp, url_prefix='/api/v1/expenses')
    app.register_blueprint(payments_bp, url_prefix='/api/v1/payments')
    app.register_blueprint(settlements_bp, url_prefix='/api/v1/settlements')
    app.register_blueprint(categories_bp, url_prefix='/api/v1/categories')

    @app.errorhandler(InvalidRecord)
    def handle_invalid_record(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(ValueError)
    def handle_value_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(RecordNotFound)
    def handle_not_found(e):
        return jsonify({"error": str(e)}), 404

    return app


def _build_repository(app):
    if app.config.get("MONGO_URI"):
        from splitledger.storage.mongo import MongoRepository
        return MongoRepository(init_mongo(app))

    from splitledger.storage.memory import InMemoryRepository
    logger.warning("MONGO_URI not set, using an in-memory repository")
    return InMemoryRepository()
