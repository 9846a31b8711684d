"""
SQLAlchemy models for cover letters and their templates.

Exposes `Base`, the timestamp/id helpers, and both ORM classes.
"""

from .base import Base, now_utc, new_record_id  # re-export

from .cover_letters import CoverLetter
from .templates import CoverLetterTemplate

__all__ = [
    # base
    "Base",
    "now_utc",
    "new_record_id",
    # records
    "CoverLetter",
    "CoverLetterTemplate",
]
