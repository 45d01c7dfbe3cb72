from collections import defaultdict

from flask import current_app

from app.errors import InvalidArgument, NotFound
from app.extensions import db
from app.models import Attendance, Meeting, User
from app.models.enums import AttendanceStatus, MeetingType
from app.services.validation import require_choice, require_id, require_text

MEETING_FIELDS = {
    "name": "name",
    "date": "date",
    "startTime": "start_time",
    "endTime": "end_time",
    "notes": "notes",
}


def list_meetings():
    return Meeting.query.order_by(Meeting.date.desc()).all()


def list_meetings_by_date():
    grouped = defaultdict(list)
    for meeting in Meeting.query.all():
        grouped[meeting.date].append(meeting)
    return dict(grouped)


def get_meeting(meeting_id):
    meeting_id = require_id(meeting_id, "meetingId")
    meeting = db.session.get(Meeting, meeting_id)
    if meeting is None:
        raise NotFound("Meeting not found")
    return meeting


def create_meeting(data, attendee_ids=None):
    missing = [key for key in ("name", "date", "startTime", "endTime") if not data.get(key)]
    if missing:
        raise InvalidArgument(f"Missing required fields: {', '.join(missing)}")
    if attendee_ids is None:
        attendee_ids = []
    if not isinstance(attendee_ids, list):
        raise InvalidArgument("attendeeIds must be a list of user ids")
    attendee_ids = list(
        dict.fromkeys(require_id(user_id, "attendeeId") for user_id in attendee_ids)
    )
    for user_id in attendee_ids:
        if db.session.get(User, user_id) is None:
            raise NotFound(f"User {user_id} not found")

    meeting = Meeting(
        name=require_text(data["name"], "name"),
        date=require_text(data["date"], "date"),
        start_time=require_text(data["startTime"], "startTime"),
        end_time=require_text(data["endTime"], "endTime"),
        notes=data.get("notes") or "",
        type=require_choice(data.get("type") or MeetingType.REGULAR.value, MeetingType, "type").value,
    )
    db.session.add(meeting)
    db.session.flush()

    for user_id in attendee_ids:
        db.session.add(
            Attendance(
                user_id=user_id,
                meeting_id=meeting.id,
                status=AttendanceStatus.PENDING.value,
            )
        )

    db.session.commit()
    current_app.logger.info(
        "Created meeting %s (%s) with %d attendees",
        meeting.id,
        meeting.name,
        len(meeting.attendance),
    )
    return meeting


def update_meeting(meeting_id, updates):
    meeting = get_meeting(meeting_id)

    for key, attr in MEETING_FIELDS.items():
        if key in updates:
            value = updates[key]
            if key == "notes":
                meeting.notes = value or ""
            else:
                setattr(meeting, attr, require_text(value, key))
    if "type" in updates:
        meeting.type = require_choice(updates["type"], MeetingType, "type").value

    db.session.commit()
    return meeting


def list_meeting_users(meeting_id):
    meeting = get_meeting(meeting_id)
    return [row.user for row in meeting.attendance]


def delete_meeting(meeting_id):
    meeting = get_meeting(meeting_id)

    # Attendance, requests, voting events and their records cascade.
    db.session.delete(meeting)
    db.session.commit()
    current_app.logger.info("Deleted meeting %s", meeting_id)
