"""
Shared SQLAlchemy base and helpers.
"""
import uuid
from sqlalchemy.orm import declarative_base
from datetime import datetime, UTC


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


def new_record_id() -> str:
    """Return a fresh opaque identifier for rows created without one."""
    return str(uuid.uuid4())


Base = declarative_base()
