from app.extensions import db
from app.models.base import generate_id, utcnow


class VotingEvent(db.Model):
    __tablename__ = "voting_events"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    meeting_id = db.Column(db.String(36), db.ForeignKey("meetings.id"), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    # Free-form tag such as YES_NO, APPROVAL or ROLL_CALL.
    vote_type = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    deleted_at = db.Column(db.DateTime, nullable=True)
    updated_by = db.Column(db.String(255), nullable=True)

    voting_records = db.relationship(
        "VotingRecord", backref="voting_event", lazy=True, cascade="all, delete"
    )
