from flask import jsonify, request
from flask_login import login_required

from app.routes.serializers import voting_event_json, voting_record_json
from app.routes.utils import json_body
from app.services import voting as voting_service
from app.services.security import eboard_required, require_self_or_eboard


def register_voting_routes(app):
    @app.route("/api/voting-event")
    @login_required
    def list_voting_events():
        return jsonify(
            [voting_event_json(event) for event in voting_service.list_voting_events()]
        )

    @app.route("/api/voting-event", methods=["POST"])
    @login_required
    @eboard_required
    def create_voting_event():
        event = voting_service.create_voting_event(json_body())
        return jsonify(voting_event_json(event)), 201

    @app.route("/api/voting-event/active")
    @login_required
    def active_voting_event():
        event = voting_service.get_active_voting_event()
        return jsonify(voting_event_json(event) if event else None)

    @app.route("/api/voting-event/by-type/<vote_type>")
    @login_required
    def voting_events_by_type(vote_type):
        events = voting_service.list_voting_events_by_type(vote_type)
        return jsonify([voting_event_json(event) for event in events])

    @app.route("/api/voting-event/<voting_event_id>")
    @login_required
    def get_voting_event(voting_event_id):
        return jsonify(voting_event_json(voting_service.get_voting_event(voting_event_id)))

    @app.route("/api/voting-event/<voting_event_id>", methods=["PUT"])
    @login_required
    @eboard_required
    def update_voting_event(voting_event_id):
        event = voting_service.update_voting_event(voting_event_id, json_body())
        return jsonify(voting_event_json(event))

    @app.route("/api/voting-event/<voting_event_id>/end", methods=["POST"])
    @login_required
    @eboard_required
    def end_voting_event(voting_event_id):
        data = json_body() if request.get_data() else {}
        event = voting_service.end_voting_event(voting_event_id, data.get("updatedBy"))
        return jsonify(voting_event_json(event))

    @app.route("/api/voting-event/<voting_event_id>/results")
    @login_required
    def voting_event_results(voting_event_id):
        event = voting_service.get_voting_event(voting_event_id)
        tally = voting_service.tally_voting_event(event)
        return jsonify(
            {
                "votingEventId": event.id,
                "totalVotes": tally["total_votes"],
                "isTie": tally["is_tie"],
                "results": tally["results"],
            }
        )

    @app.route("/api/voting-record")
    @login_required
    @eboard_required
    def list_voting_records():
        return jsonify(
            [voting_record_json(record) for record in voting_service.list_voting_records()]
        )

    @app.route("/api/voting-record", methods=["POST"])
    @login_required
    def create_voting_record():
        data = json_body()
        if isinstance(data.get("userId"), str):
            require_self_or_eboard(data["userId"])
        record = voting_service.create_voting_record(data)
        return jsonify(voting_record_json(record)), 201

    @app.route("/api/voting-record/by-voting-event/<voting_event_id>")
    @login_required
    def voting_records_by_event(voting_event_id):
        records = voting_service.list_records_for_event(voting_event_id)
        return jsonify([voting_record_json(record) for record in records])

    @app.route("/api/voting-record/<voting_record_id>", methods=["DELETE"])
    @login_required
    @eboard_required
    def delete_voting_record(voting_record_id):
        voting_service.delete_voting_record(voting_record_id)
        return "", 204
