from datetime import datetime, timedelta
from pathlib import Path
import sys
import os

import pytest
from flask import g

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for any module-level app creation during test imports.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from app import create_app
from app.extensions import db
from app.models import Attendance, Meeting, Role, User
from app.models.enums import AttendanceStatus, MeetingType, RoleType


@pytest.fixture()
def app(tmp_path: Path):
    db_file = tmp_path / "test.sqlite3"
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_file}",
            "SQLALCHEMY_ENGINE_OPTIONS": {},
            "SECRET_KEY": "test-secret",
            "AUTH_PROVIDER_SECRET": "provider-secret",
        }
    )

    # Requests reuse the fixture's app context, so the logged-in user cached
    # on g has to be dropped between requests.
    @app.before_request
    def reset_login_cache():
        g.pop("_login_user", None)

    with app.app_context():
        driver = db.engine.url.drivername
        if driver != "sqlite":
            raise RuntimeError(
                f"Test database must be SQLite, got '{driver}'. Refusing to run destructive test setup."
            )
        db.drop_all()
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def roles(db_session):
    member = Role(role_type=RoleType.MEMBER.value)
    eboard = Role(role_type=RoleType.EBOARD.value)
    db_session.add_all([member, eboard])
    db_session.commit()
    return {"member": member, "eboard": eboard}


@pytest.fixture()
def member_user(db_session, roles):
    user = User(
        auth_id="auth-member",
        email="member@example.com",
        first_name="Maya",
        last_name="Member",
        nuid="001234567",
        role_id=roles["member"].id,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def other_member(db_session, roles):
    user = User(
        auth_id="auth-other",
        email="other@example.com",
        first_name="Omar",
        last_name="Other",
        nuid="007654321",
        role_id=roles["member"].id,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def eboard_user(db_session, roles):
    user = User(
        auth_id="auth-eboard",
        email="eboard@example.com",
        first_name="Eli",
        last_name="Board",
        nuid="009999999",
        role_id=roles["eboard"].id,
    )
    db_session.add(user)
    db_session.commit()
    return user


def _client_for(app, user):
    client = app.test_client()
    with client.session_transaction() as session:
        session["_user_id"] = str(user.id)
        session["_fresh"] = True
    return client


@pytest.fixture()
def member_client(app, member_user):
    return _client_for(app, member_user)


@pytest.fixture()
def eboard_client(app, eboard_user):
    return _client_for(app, eboard_user)


@pytest.fixture()
def make_meeting(db_session):
    def factory(hours_from_now=72, meeting_type=MeetingType.REGULAR, name="General Meeting"):
        start = datetime.now() + timedelta(hours=hours_from_now)
        meeting = Meeting(
            name=name,
            date=start.strftime("%Y-%m-%d"),
            start_time=start.strftime("%H:%M"),
            end_time=(start + timedelta(hours=1)).strftime("%H:%M"),
            notes="",
            type=meeting_type.value,
        )
        db_session.add(meeting)
        db_session.commit()
        return meeting

    return factory


@pytest.fixture()
def make_attendance(db_session):
    def factory(user, meeting, status=AttendanceStatus.PENDING):
        attendance = Attendance(user_id=user.id, meeting_id=meeting.id, status=status.value)
        db_session.add(attendance)
        db_session.commit()
        return attendance

    return factory
