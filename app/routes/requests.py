from flask import jsonify
from flask_login import login_required

from app.routes.serializers import request_json
from app.routes.utils import json_body
from app.services import requests as request_service
from app.services.security import eboard_required, require_self_or_eboard


def register_request_routes(app):
    @app.route("/api/requests")
    @login_required
    @eboard_required
    def list_requests():
        return jsonify(
            [
                request_json(item, include_attendance=True)
                for item in request_service.list_requests()
            ]
        )

    @app.route("/api/requests/<request_id>")
    @login_required
    def get_request(request_id):
        absence_request = request_service.get_request(request_id)
        require_self_or_eboard(absence_request.attendance.user_id)
        return jsonify(request_json(absence_request, include_attendance=True))

    @app.route("/api/requests/<request_id>", methods=["PUT"])
    @login_required
    def update_request(request_id):
        absence_request = request_service.get_request(request_id)
        require_self_or_eboard(absence_request.attendance.user_id)
        absence_request = request_service.update_request(request_id, json_body())
        return jsonify(request_json(absence_request))

    @app.route("/api/requests/<request_id>", methods=["DELETE"])
    @login_required
    def delete_request(request_id):
        absence_request = request_service.get_request(request_id)
        require_self_or_eboard(absence_request.attendance.user_id)
        request_service.delete_request(request_id)
        return jsonify({"message": "Request deleted"})
