from flask import current_app

from app.errors import InvalidArgument, NotFound
from app.extensions import db
from app.models import AbsenceRequest, Attendance, Meeting
from app.models.enums import AttendanceMode, TimeAdjustment
from app.services.lateness import is_request_late, now_local
from app.services.validation import require_choice, require_id, require_text


def _time_adjustment(value):
    if value is None or value == "":
        return None
    return require_choice(value, TimeAdjustment, "timeAdjustment").value


def create_request(attendance_id, reason, attendance_mode, time_adjustment=None, now=None):
    attendance_id = require_id(attendance_id, "attendanceId")
    reason = require_text(reason, "reason")
    mode = require_choice(attendance_mode, AttendanceMode, "attendanceMode")
    adjustment = _time_adjustment(time_adjustment)

    attendance = db.session.get(Attendance, attendance_id)
    if attendance is None:
        raise NotFound("Attendance record not found")
    if attendance.request is not None:
        raise InvalidArgument("A request already exists for this attendance record")

    meeting = attendance.meeting
    if meeting is None:
        raise NotFound("Meeting not found for this attendance record")

    is_late = is_request_late(
        meeting.date, meeting.start_time, now if now is not None else now_local()
    )

    absence_request = AbsenceRequest(
        attendance_id=attendance.id,
        reason=reason,
        attendance_mode=mode.value,
        time_adjustment=adjustment,
        is_late=is_late,
    )
    db.session.add(absence_request)
    db.session.commit()

    if is_late:
        current_app.logger.info(
            "Late request %s filed for meeting %s", absence_request.id, meeting.id
        )
    return absence_request


def get_request(request_id):
    request_id = require_id(request_id, "requestId")
    absence_request = db.session.get(AbsenceRequest, request_id)
    if absence_request is None:
        raise NotFound("Request not found")
    return absence_request


def list_requests():
    return (
        AbsenceRequest.query.join(Attendance, AbsenceRequest.attendance_id == Attendance.id)
        .join(Meeting, Attendance.meeting_id == Meeting.id)
        .order_by(Meeting.date.desc())
        .all()
    )


def update_request(request_id, data):
    absence_request = get_request(request_id)

    if data.get("reason") is not None:
        absence_request.reason = require_text(data["reason"], "reason")
    if "attendanceMode" in data:
        absence_request.attendance_mode = require_choice(
            data["attendanceMode"], AttendanceMode, "attendanceMode"
        ).value
    if "timeAdjustment" in data:
        absence_request.time_adjustment = _time_adjustment(data["timeAdjustment"])

    db.session.commit()
    return absence_request


def delete_request(request_id):
    absence_request = get_request(request_id)
    db.session.delete(absence_request)
    db.session.commit()
