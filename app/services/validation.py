from app.errors import InvalidArgument, InvalidStatus
from app.models.enums import AttendanceStatus


def require_id(value, field_name):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"Invalid or missing {field_name}")
    return value.strip()


def require_text(value, field_name):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field_name} is required")
    return value.strip()


def optional_text(value, field_name):
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidArgument(f"{field_name} must be a string")
    return value


def require_choice(value, enum_cls, field_name):
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgument(f"Invalid {field_name} value") from None


def parse_attendance_status(value):
    if isinstance(value, str):
        try:
            return AttendanceStatus(value)
        except ValueError:
            pass
    raise InvalidStatus(f"Invalid attendance status: {value}")
