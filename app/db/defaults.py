"""Application-side column defaults shared by the models."""
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # microsecond precision keeps created_at usable as an ordering key on SQLite
    return datetime.now(timezone.utc)
