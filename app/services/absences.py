"""Unexcused absence allowances per meeting category."""

from app.extensions import db
from app.models import Attendance, Meeting
from app.models.enums import AttendanceStatus, MeetingType
from app.services.validation import require_id

REGULAR_ABSENCE_ALLOWANCE = 3
FULL_BODY_ABSENCE_ALLOWANCE = 1


def _allowance(used, allowed):
    return {"used": used, "allowed": allowed, "remaining": max(0, allowed - used)}


def summarize_absences(meeting_types):
    """Build the allowance summary from the meeting types of unexcused absences."""
    regular_used = 0
    full_body_used = 0
    for meeting_type in meeting_types:
        if meeting_type == MeetingType.REGULAR.value:
            regular_used += 1
        elif meeting_type == MeetingType.FULL_BODY.value:
            full_body_used += 1

    return {
        "regular": _allowance(regular_used, REGULAR_ABSENCE_ALLOWANCE),
        "fullBody": _allowance(full_body_used, FULL_BODY_ABSENCE_ALLOWANCE),
    }


def remaining_unexcused_absences(user_id):
    user_id = require_id(user_id, "userId")

    rows = (
        db.session.query(Meeting.type)
        .join(Attendance, Attendance.meeting_id == Meeting.id)
        .filter(
            Attendance.user_id == user_id,
            Attendance.status == AttendanceStatus.UNEXCUSED_ABSENCE.value,
        )
        .all()
    )
    return summarize_absences(row[0] for row in rows)
