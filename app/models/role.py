from app.extensions import db
from app.models.base import generate_id


class Role(db.Model):
    __tablename__ = "roles"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    role_type = db.Column(db.String(20), unique=True, nullable=False)

    users = db.relationship("User", backref="role", lazy=True)
