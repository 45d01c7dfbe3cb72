import hmac

from flask import current_app, jsonify, request
from flask_login import login_required, login_user, logout_user

from app.errors import Forbidden, InvalidArgument
from app.routes.serializers import user_json
from app.routes.utils import json_body
from app.services import users as user_service
from app.services.security import generate_auth_token


def _require_provider_secret():
    # The auth provider calls these endpoints after it has verified the person.
    expected = current_app.config.get("AUTH_PROVIDER_SECRET")
    if not expected:
        return
    supplied = request.headers.get("X-Auth-Provider-Secret", "")
    if not hmac.compare_digest(supplied, expected):
        raise Forbidden("Unknown auth provider")


def register_auth_routes(app):
    @app.route("/api/auth/signup", methods=["POST"])
    def signup():
        _require_provider_secret()
        data = json_body()
        if not data.get("authId"):
            raise InvalidArgument("authId is required")

        # Self-service signups always start as members.
        data.pop("roleId", None)
        user = user_service.create_user(data)
        login_user(user)
        return (
            jsonify(
                {
                    "message": "User created successfully",
                    "user": user_json(user),
                    "token": generate_auth_token(user.auth_id),
                }
            ),
            201,
        )

    @app.route("/api/auth/token", methods=["POST"])
    def issue_token():
        _require_provider_secret()
        user = user_service.get_user_by_auth_id(json_body().get("authId"))
        login_user(user)
        return jsonify({"user": user_json(user), "token": generate_auth_token(user.auth_id)})

    @app.route("/api/auth/logout", methods=["POST"])
    @login_required
    def logout():
        logout_user()
        return "", 204
