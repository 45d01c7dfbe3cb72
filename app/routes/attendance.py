from flask import jsonify
from flask_login import current_user, login_required

from app.errors import InvalidArgument
from app.routes.serializers import attendance_json, request_json
from app.routes.utils import json_body
from app.services import attendance as attendance_service
from app.services import requests as request_service
from app.services.absences import remaining_unexcused_absences
from app.services.security import eboard_required, require_self_or_eboard


def register_attendance_routes(app):
    @app.route("/api/attendance/user/<user_id>")
    @login_required
    def user_attendance(user_id):
        require_self_or_eboard(user_id)
        rows = attendance_service.list_user_attendance(user_id)
        return jsonify(
            [
                attendance_json(row, include_meeting=True, include_request=True)
                for row in rows
            ]
        )

    @app.route("/api/attendance/user/<user_id>/remaining-absences")
    @login_required
    def user_remaining_absences(user_id):
        require_self_or_eboard(user_id)
        return jsonify(remaining_unexcused_absences(user_id))

    @app.route("/api/attendance/user/requests/<user_id>")
    @login_required
    def user_requests(user_id):
        require_self_or_eboard(user_id)
        payload = []
        for row in attendance_service.list_user_requests(user_id):
            entry = request_json(row.request)
            entry["attendanceStatus"] = row.status
            entry["attendance"] = attendance_json(row, include_meeting=True)
            payload.append(entry)
        return jsonify(payload)

    @app.route("/api/attendance/meeting/<meeting_id>")
    @login_required
    def meeting_attendance(meeting_id):
        rows = attendance_service.list_meeting_attendance(meeting_id)
        return jsonify(
            [attendance_json(row, include_user=True, include_request=True) for row in rows]
        )

    @app.route("/api/attendance", methods=["POST"])
    @login_required
    @eboard_required
    def create_attendance():
        data = json_body()
        attendance = attendance_service.create_attendance(
            data.get("userId"), data.get("meetingId"), data.get("status")
        )
        return jsonify(attendance_json(attendance)), 201

    @app.route("/api/attendance/check-in", methods=["POST"])
    @login_required
    @eboard_required
    def check_in():
        data = json_body()
        if data.get("email"):
            attendance = attendance_service.check_in_by_email(
                data["email"], data.get("attendanceId"), data.get("status")
            )
        else:
            attendance = attendance_service.mark_attendance(
                data.get("userId"), data.get("meetingId"), data.get("status")
            )
        return jsonify(attendance_json(attendance))

    @app.route("/api/attendance/status", methods=["PUT"])
    @login_required
    @eboard_required
    def update_attendance_status():
        data = json_body()
        if "requestId" not in data or "status" not in data:
            raise InvalidArgument("Missing requestId or status")
        attendance = attendance_service.update_status_for_request(
            data["requestId"], data["status"]
        )
        return jsonify(attendance_json(attendance))

    @app.route("/api/attendance/<attendance_id>", methods=["PATCH"])
    @login_required
    @eboard_required
    def update_attendance(attendance_id):
        attendance = attendance_service.update_attendance(attendance_id, json_body())
        return jsonify(attendance_json(attendance))

    @app.route("/api/attendance/<attendance_id>", methods=["DELETE"])
    @login_required
    @eboard_required
    def delete_attendance(attendance_id):
        attendance_service.delete_attendance(attendance_id)
        return "", 204

    @app.route("/api/attendance/<attendance_id>/requests", methods=["POST"])
    @login_required
    def create_request(attendance_id):
        attendance = attendance_service.get_attendance(attendance_id)
        require_self_or_eboard(attendance.user_id)

        data = json_body()
        if not data.get("reason") or not data.get("attendanceMode"):
            raise InvalidArgument("reason and attendanceMode are required")

        absence_request = request_service.create_request(
            attendance.id,
            data["reason"],
            data["attendanceMode"],
            data.get("timeAdjustment"),
        )
        app.logger.info("User %s filed request %s", current_user.id, absence_request.id)
        return jsonify(request_json(absence_request)), 201
