from flask_login import UserMixin

from app.extensions import db
from app.models.base import generate_id
from app.models.enums import RoleType


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    auth_id = db.Column(db.String(255), unique=True, nullable=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    nuid = db.Column(db.String(20), unique=True, nullable=False)
    role_id = db.Column(db.String(36), db.ForeignKey("roles.id"), nullable=False)

    attendance = db.relationship(
        "Attendance", backref="user", lazy=True, cascade="all, delete"
    )
    voting_records = db.relationship(
        "VotingRecord", backref="user", lazy=True, cascade="all, delete"
    )

    @property
    def is_eboard(self):
        return self.role is not None and self.role.role_type == RoleType.EBOARD.value
