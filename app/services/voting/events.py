from datetime import datetime

from flask import current_app

from app.errors import InvalidArgument, NotFound
from app.extensions import db
from app.models import Meeting, VotingEvent
from app.models.base import utcnow
from app.services.validation import optional_text, require_id, require_text

UPDATABLE_FIELDS = ("meetingId", "name", "voteType", "updatedBy", "deletedAt")


def list_voting_events():
    return VotingEvent.query.order_by(VotingEvent.created_at.desc()).all()


def get_voting_event(voting_event_id):
    voting_event_id = require_id(voting_event_id, "votingEventId")
    event = db.session.get(VotingEvent, voting_event_id)
    if event is None:
        raise NotFound("Voting event not found")
    return event


def list_voting_events_by_type(vote_type):
    vote_type = require_text(vote_type, "voteType")
    return VotingEvent.query.filter_by(vote_type=vote_type).all()


def get_active_voting_event():
    """Most recently created event that has not been ended, or None."""
    return (
        VotingEvent.query.filter(VotingEvent.deleted_at.is_(None))
        .order_by(VotingEvent.created_at.desc())
        .first()
    )


def _require_meeting(meeting_id):
    meeting_id = require_id(meeting_id, "meetingId")
    if db.session.get(Meeting, meeting_id) is None:
        raise NotFound("Meeting not found")
    return meeting_id


def create_voting_event(data):
    missing = [key for key in ("meetingId", "name", "voteType") if not data.get(key)]
    if missing:
        raise InvalidArgument(
            "Missing required fields: meetingId, name, and voteType are required"
        )

    event = VotingEvent(
        meeting_id=_require_meeting(data["meetingId"]),
        name=require_text(data["name"], "name"),
        vote_type=require_text(data["voteType"], "voteType"),
        updated_by=optional_text(data.get("updatedBy"), "updatedBy"),
    )
    db.session.add(event)
    db.session.commit()
    current_app.logger.info(
        "Opened voting event %s (%s) for meeting %s", event.id, event.vote_type, event.meeting_id
    )
    return event


def _parse_timestamp(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidArgument("deletedAt must be an ISO timestamp or null")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).replace(tzinfo=None)
    except ValueError:
        raise InvalidArgument("deletedAt must be an ISO timestamp or null") from None


def update_voting_event(voting_event_id, updates):
    if not any(key in updates for key in UPDATABLE_FIELDS):
        raise InvalidArgument("No valid fields to update")

    event = get_voting_event(voting_event_id)

    if "meetingId" in updates:
        event.meeting_id = _require_meeting(updates["meetingId"])
    if "name" in updates:
        event.name = require_text(updates["name"], "name")
    if "voteType" in updates:
        event.vote_type = require_text(updates["voteType"], "voteType")
    if "updatedBy" in updates:
        event.updated_by = optional_text(updates["updatedBy"], "updatedBy")
    if "deletedAt" in updates:
        event.deleted_at = _parse_timestamp(updates["deletedAt"])

    db.session.commit()
    return event


def end_voting_event(voting_event_id, updated_by=None):
    event = get_voting_event(voting_event_id)
    if event.deleted_at is None:
        event.deleted_at = utcnow()
    event.updated_by = optional_text(updated_by, "updatedBy") or event.updated_by
    db.session.commit()
    current_app.logger.info("Ended voting event %s", event.id)
    return event
