import logging

from flask import Flask, jsonify

from app.config import Config
from app.errors import register_error_handlers
from app.extensions import db, login_manager, migrate
from app.models import User
from app.routes import register_routes
from app.services.security import load_user_from_token


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, user_id)

    @login_manager.request_loader
    def load_user_from_request(request):
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            return None
        return load_user_from_token(header[len("Bearer "):].strip())

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"error": "Unauthorized"}), 401

    register_error_handlers(app)
    register_routes(app)
    return app


__all__ = ["db", "migrate", "create_app"]
