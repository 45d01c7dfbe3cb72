from flask import current_app
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.errors import NotFound
from app.extensions import db
from app.models import AbsenceRequest, Attendance, Meeting, User
from app.models.base import generate_id
from app.services.users import normalize_email
from app.services.validation import parse_attendance_status, require_id


def get_attendance(attendance_id):
    attendance_id = require_id(attendance_id, "attendanceId")
    attendance = db.session.get(Attendance, attendance_id)
    if attendance is None:
        raise NotFound("Attendance record not found")
    return attendance


def list_user_attendance(user_id):
    user_id = require_id(user_id, "userId")
    return Attendance.query.filter_by(user_id=user_id).all()


def list_meeting_attendance(meeting_id):
    meeting_id = require_id(meeting_id, "meetingId")
    return Attendance.query.filter_by(meeting_id=meeting_id).all()


def list_user_requests(user_id):
    """Attendance rows of a user that carry a request."""
    return [row for row in list_user_attendance(user_id) if row.request is not None]


def _require_user_and_meeting(user_id, meeting_id):
    user_id = require_id(user_id, "userId")
    meeting_id = require_id(meeting_id, "meetingId")
    if db.session.get(User, user_id) is None:
        raise NotFound("User not found")
    if db.session.get(Meeting, meeting_id) is None:
        raise NotFound("Meeting not found")
    return user_id, meeting_id


def create_attendance(user_id, meeting_id, status):
    status = parse_attendance_status(status)
    user_id, meeting_id = _require_user_and_meeting(user_id, meeting_id)

    attendance = Attendance(user_id=user_id, meeting_id=meeting_id, status=status.value)
    db.session.add(attendance)
    db.session.commit()
    return attendance


def _insert_for_dialect():
    name = db.engine.dialect.name
    if name == "mysql":
        return mysql_insert
    if name == "postgresql":
        return postgresql_insert
    return sqlite_insert


def mark_attendance(user_id, meeting_id, status):
    """Set a user's status for a meeting, creating the row if needed.

    The (user, meeting) unique constraint resolves concurrent check-ins in the
    database rather than in the application.
    """
    status = parse_attendance_status(status)
    user_id, meeting_id = _require_user_and_meeting(user_id, meeting_id)

    insert = _insert_for_dialect()
    table = Attendance.__table__
    stmt = insert(table).values(
        id=generate_id(), user_id=user_id, meeting_id=meeting_id, status=status.value
    )
    if insert is mysql_insert:
        stmt = stmt.on_duplicate_key_update(status=stmt.inserted.status)
    else:
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id, table.c.meeting_id],
            set_={"status": stmt.excluded.status},
        )
    db.session.execute(stmt)
    db.session.commit()

    attendance = Attendance.query.filter_by(user_id=user_id, meeting_id=meeting_id).one()
    db.session.refresh(attendance)
    current_app.logger.info(
        "Marked user %s as %s for meeting %s", user_id, status.value, meeting_id
    )
    return attendance


def check_in_by_email(email, attendance_id, status):
    email = normalize_email(email)
    status = parse_attendance_status(status)
    attendance_id = require_id(attendance_id, "attendanceId")

    user = User.query.filter_by(email=email).first()
    if user is None:
        raise NotFound("User not found")

    attendance = Attendance.query.filter_by(id=attendance_id, user_id=user.id).first()
    if attendance is None:
        raise NotFound("Attendance record not found for this user")

    attendance.status = status.value
    db.session.commit()
    return attendance


def update_attendance(attendance_id, data):
    attendance = get_attendance(attendance_id)
    if "status" in data:
        attendance.status = parse_attendance_status(data["status"]).value
    db.session.commit()
    return attendance


def update_status_for_request(request_id, status):
    """Resolve a request by setting the status of its attendance row."""
    request_id = require_id(request_id, "requestId")
    status = parse_attendance_status(status)

    absence_request = db.session.get(AbsenceRequest, request_id)
    if absence_request is None:
        raise NotFound("Request not found")

    attendance = absence_request.attendance
    previous = attendance.status
    attendance.status = status.value
    db.session.commit()
    current_app.logger.info(
        "Request %s moved attendance %s from %s to %s",
        request_id,
        attendance.id,
        previous,
        status.value,
    )
    return attendance


def delete_attendance(attendance_id):
    attendance = get_attendance(attendance_id)
    db.session.delete(attendance)
    db.session.commit()
