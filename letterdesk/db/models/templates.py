from sqlalchemy import Column, String, Text, Boolean, Index
from .base import Base, now_utc, new_record_id
from ..types import UTCDateTime


class CoverLetterTemplate(Base):
    __tablename__ = 'cover_letter_templates'

    id = Column(String(64), primary_key=True, default=new_record_id)
    # NULL owner marks a system template visible to every user
    user_id = Column(String(255), nullable=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    tone = Column(Text, nullable=True)
    language = Column(Text, nullable=True)
    body = Column(Text, nullable=False)
    is_system = Column(Boolean, nullable=False, default=False)
    created_at = Column(UTCDateTime(), default=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_cover_letter_templates_user_id', 'user_id'),
    )
