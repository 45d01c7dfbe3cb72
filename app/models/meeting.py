from app.extensions import db
from app.models.base import generate_id
from app.models.enums import MeetingType


class Meeting(db.Model):
    __tablename__ = "meetings"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(200), nullable=False)
    # Kept as the strings the client submitted; parsed on demand.
    date = db.Column(db.String(20), nullable=False)
    start_time = db.Column(db.String(20), nullable=False)
    end_time = db.Column(db.String(20), nullable=False)
    notes = db.Column(db.Text, nullable=False, default="")
    type = db.Column(db.String(20), nullable=False, default=MeetingType.REGULAR.value)

    attendance = db.relationship(
        "Attendance", backref="meeting", lazy=True, cascade="all, delete"
    )
    voting_events = db.relationship(
        "VotingEvent", backref="meeting", lazy=True, cascade="all, delete"
    )
