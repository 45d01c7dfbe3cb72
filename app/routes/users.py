from flask import jsonify, request
from flask_login import current_user, login_required

from app.routes.serializers import role_json, user_json, user_name_json
from app.routes.utils import json_body
from app.services import users as user_service
from app.services.security import eboard_required, require_self_or_eboard


def register_user_routes(app):
    @app.route("/api/users")
    @login_required
    @eboard_required
    def list_users():
        return jsonify([user_json(user) for user in user_service.list_users()])

    @app.route("/api/users", methods=["POST"])
    @login_required
    @eboard_required
    def create_user():
        user = user_service.create_user(json_body())
        return jsonify(user_json(user)), 201

    @app.route("/api/users/only-name")
    @login_required
    def list_user_names():
        return jsonify([user_name_json(user) for user in user_service.list_users()])

    @app.route("/api/users/validate-nuid")
    def validate_nuid():
        user = user_service.validate_nuid(
            request.args.get("nuid"),
            request.args.get("firstName"),
            request.args.get("lastName"),
        )
        return jsonify(
            {
                "valid": True,
                "message": "NUID format is valid and matches the provided name",
                "user": {
                    "userId": user.id,
                    "nuid": user.nuid,
                    "firstName": user.first_name,
                    "lastName": user.last_name,
                    "email": user.email,
                },
            }
        )

    @app.route("/api/users/me")
    @login_required
    def current_profile():
        return jsonify(user_json(current_user))

    @app.route("/api/users/get-user-by-email/<email>")
    @login_required
    @eboard_required
    def get_user_by_email(email):
        return jsonify(user_json(user_service.get_user_by_email(email)))

    @app.route("/api/users/get-user-by-nuid/<nuid>")
    @login_required
    @eboard_required
    def get_user_by_nuid(nuid):
        return jsonify(user_json(user_service.get_user_by_nuid(nuid)))

    @app.route("/api/users/by-auth-id/<auth_id>")
    @login_required
    def get_user_by_auth_id(auth_id):
        user = user_service.get_user_by_auth_id(auth_id)
        require_self_or_eboard(user.id)
        return jsonify(user_json(user))

    @app.route("/api/users/role")
    @login_required
    def list_roles():
        return jsonify([role_json(role) for role in user_service.list_roles()])

    @app.route("/api/users/role", methods=["POST"])
    @login_required
    @eboard_required
    def create_role():
        role = user_service.create_role(json_body().get("roleType"))
        return jsonify(role_json(role)), 201

    @app.route("/api/users/role/<role_type>")
    @login_required
    @eboard_required
    def list_users_by_role(role_type):
        return jsonify(
            [user_json(user) for user in user_service.list_users_by_role(role_type)]
        )

    @app.route("/api/users/<user_id>")
    @login_required
    def get_user(user_id):
        require_self_or_eboard(user_id)
        return jsonify(user_json(user_service.get_user(user_id)))

    @app.route("/api/users/<user_id>", methods=["PUT"])
    @login_required
    def update_user(user_id):
        require_self_or_eboard(user_id)
        updates = json_body()
        if "roleId" in updates and not current_user.is_eboard:
            updates.pop("roleId")
        return jsonify(user_json(user_service.update_user(user_id, updates)))

    @app.route("/api/users/<user_id>", methods=["DELETE"])
    @login_required
    @eboard_required
    def delete_user(user_id):
        user_service.delete_user(user_id)
        return "", 204
