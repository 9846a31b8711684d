from sqlalchemy import Column, String, Text, Index
from .base import Base, now_utc, new_record_id
from ..types import UTCDateTime


class CoverLetter(Base):
    __tablename__ = 'cover_letters'

    id = Column(String(64), primary_key=True, default=new_record_id)
    user_id = Column(String(255), nullable=False)
    title = Column(Text, nullable=False)
    job_title = Column(Text, nullable=False)
    company_name = Column(Text, nullable=True)
    job_description = Column(Text, nullable=True)
    tone = Column(Text, nullable=True)
    language = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    status = Column(Text, nullable=True)
    created_at = Column(UTCDateTime(), default=now_utc, nullable=False)
    updated_at = Column(UTCDateTime(), default=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_cover_letters_user_id', 'user_id'),
    )
