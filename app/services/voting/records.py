from app.errors import InvalidArgument, NotFound
from app.extensions import db
from app.models import User, VotingRecord
from app.services.validation import optional_text, require_id
from app.services.voting.events import get_voting_event


def list_voting_records():
    return VotingRecord.query.order_by(VotingRecord.created_at).all()


def list_records_for_event(voting_event_id):
    event = get_voting_event(voting_event_id)
    return VotingRecord.query.filter_by(voting_event_id=event.id).order_by(
        VotingRecord.created_at
    ).all()


def create_voting_record(data):
    if not data.get("votingEventId") or not data.get("userId") or not data.get("result"):
        raise InvalidArgument(
            "Missing required fields: votingEventId, userId, and result are required"
        )
    if not isinstance(data["result"], str):
        raise InvalidArgument(
            "Invalid field types: votingEventId, userId, and result must be strings"
        )

    event = get_voting_event(data["votingEventId"])
    user_id = require_id(data["userId"], "userId")
    if db.session.get(User, user_id) is None:
        raise NotFound("User not found")

    record = VotingRecord(
        voting_event_id=event.id,
        user_id=user_id,
        result=data["result"],
        updated_by=optional_text(data.get("updatedBy"), "updatedBy"),
    )
    db.session.add(record)
    db.session.commit()
    return record


def delete_voting_record(voting_record_id):
    voting_record_id = require_id(voting_record_id, "votingRecordId")
    record = db.session.get(VotingRecord, voting_record_id)
    if record is None:
        raise NotFound("Voting record not found")
    db.session.delete(record)
    db.session.commit()
