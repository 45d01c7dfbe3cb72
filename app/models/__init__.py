from app.models.absence_request import AbsenceRequest
from app.models.attendance import Attendance
from app.models.meeting import Meeting
from app.models.role import Role
from app.models.user import User
from app.models.voting_event import VotingEvent
from app.models.voting_record import VotingRecord

__all__ = [
    "Role",
    "User",
    "Meeting",
    "Attendance",
    "AbsenceRequest",
    "VotingEvent",
    "VotingRecord",
]
