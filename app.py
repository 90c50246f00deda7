"""Application factory."""

import json
import os
import uuid

import click
from flask import Flask, jsonify, g, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from models import db
from notifications import build_notifier
from routes.auth import auth_bp
from routes.users import users_bp
from services import verification_service

migrate = Migrate()
jwt = JWTManager()


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    app.extensions["notifier"] = build_notifier(app.config)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(users_bp, url_prefix="/users")

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    @app.cli.command("purge-verifications")
    def purge_verifications():
        """Delete expired email verification codes."""
        removed = verification_service().purge_expired()
        click.echo(f"Removed {removed} expired verification code(s).")

    # Errors
    _register_error_handlers(app)

    return app


def _error_payload(message: str, request_id: str | None = None) -> dict:
    return {
        "success": False,
        "message": message,
        "request_id": request_id or g.get("request_id") or str(uuid.uuid4()),
    }


@jwt.unauthorized_loader
def _missing_token(reason: str):
    return jsonify(_error_payload(reason)), 401


@jwt.invalid_token_loader
def _invalid_token(reason: str):
    return jsonify(_error_payload(reason)), 401


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return jsonify(_error_payload("Token has expired")), 401


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():  # pragma: no cover
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):  # pragma: no cover
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        request_id = g.get("request_id") or str(uuid.uuid4())
        response = error.get_response()
        response.data = json.dumps(_error_payload(error.description, request_id))
        response.content_type = "application/json"
        response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        request_id = g.get("request_id") or str(uuid.uuid4())
        app.logger.exception("Unhandled application error", exc_info=error)
        response = jsonify(_error_payload("An unexpected error occurred.", request_id))
        response.status_code = 500
        response.headers.setdefault("X-Request-ID", request_id)
        return response


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
