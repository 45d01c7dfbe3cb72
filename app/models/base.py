import uuid
from datetime import datetime, timezone


def generate_id():
    return str(uuid.uuid4())


def utcnow():
    # Columns are naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)
