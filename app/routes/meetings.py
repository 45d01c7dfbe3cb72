from flask import jsonify
from flask_login import login_required

from app.routes.serializers import meeting_json, user_json
from app.routes.utils import json_body
from app.services import meetings as meeting_service
from app.services.security import eboard_required


def register_meeting_routes(app):
    @app.route("/api/meeting")
    @login_required
    def list_meetings():
        return jsonify(
            [
                meeting_json(meeting, include_attendance=True)
                for meeting in meeting_service.list_meetings()
            ]
        )

    @app.route("/api/meeting/by-date")
    @login_required
    def list_meetings_by_date():
        grouped = meeting_service.list_meetings_by_date()
        return jsonify(
            {
                date: [meeting_json(meeting) for meeting in meetings]
                for date, meetings in grouped.items()
            }
        )

    @app.route("/api/meeting", methods=["POST"])
    @login_required
    @eboard_required
    def create_meeting():
        data = json_body()
        meeting = meeting_service.create_meeting(data, data.get("attendeeIds"))
        return jsonify(meeting_json(meeting, include_attendance=True)), 201

    @app.route("/api/meeting/<meeting_id>")
    @login_required
    def get_meeting(meeting_id):
        return jsonify(meeting_json(meeting_service.get_meeting(meeting_id)))

    @app.route("/api/meeting/<meeting_id>", methods=["PUT"])
    @login_required
    @eboard_required
    def update_meeting(meeting_id):
        meeting = meeting_service.update_meeting(meeting_id, json_body())
        return jsonify(meeting_json(meeting))

    @app.route("/api/meeting/<meeting_id>", methods=["DELETE"])
    @login_required
    @eboard_required
    def delete_meeting(meeting_id):
        meeting_service.delete_meeting(meeting_id)
        return "", 204

    @app.route("/api/meeting/<meeting_id>/users")
    @login_required
    def meeting_users(meeting_id):
        return jsonify(
            [user_json(user) for user in meeting_service.list_meeting_users(meeting_id)]
        )
