from enum import Enum


class RoleType(str, Enum):
    MEMBER = "MEMBER"
    EBOARD = "EBOARD"


class MeetingType(str, Enum):
    REGULAR = "REGULAR"
    FULL_BODY = "FULL_BODY"


class AttendanceStatus(str, Enum):
    """Status of one user at one meeting.

    PENDING is the unresolved slot, PRESENT is set by check-in, and the two
    absence values are where an approved or denied request ends up. Any value
    may be set from any other.
    """

    PRESENT = "PRESENT"
    EXCUSED_ABSENCE = "EXCUSED_ABSENCE"
    UNEXCUSED_ABSENCE = "UNEXCUSED_ABSENCE"
    PENDING = "PENDING"


class AttendanceMode(str, Enum):
    ONLINE = "ONLINE"
    IN_PERSON = "IN_PERSON"


class TimeAdjustment(str, Enum):
    ARRIVING_LATE = "ARRIVING_LATE"
    LEAVING_EARLY = "LEAVING_EARLY"
