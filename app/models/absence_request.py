from app.extensions import db
from app.models.base import generate_id, utcnow


class AbsenceRequest(db.Model):
    __tablename__ = "requests"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    attendance_id = db.Column(
        db.String(36), db.ForeignKey("attendance.id"), unique=True, nullable=False
    )
    reason = db.Column(db.Text, nullable=False)
    attendance_mode = db.Column(db.String(20), nullable=False)
    time_adjustment = db.Column(db.String(20), nullable=True)
    is_late = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
