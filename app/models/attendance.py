from app.extensions import db
from app.models.base import generate_id
from app.models.enums import AttendanceStatus


class Attendance(db.Model):
    __tablename__ = "attendance"
    __table_args__ = (
        db.UniqueConstraint("user_id", "meeting_id", name="uq_attendance_user_meeting"),
    )

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)
    meeting_id = db.Column(db.String(36), db.ForeignKey("meetings.id"), nullable=False)
    status = db.Column(
        db.String(30), nullable=False, default=AttendanceStatus.PENDING.value
    )

    request = db.relationship(
        "AbsenceRequest",
        backref="attendance",
        uselist=False,
        lazy=True,
        cascade="all, delete",
    )
