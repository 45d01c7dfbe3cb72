from app.extensions import db
from app.models.base import generate_id, utcnow


class VotingRecord(db.Model):
    __tablename__ = "voting_records"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    voting_event_id = db.Column(
        db.String(36), db.ForeignKey("voting_events.id"), nullable=False
    )
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)
    result = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_by = db.Column(db.String(255), nullable=True)
