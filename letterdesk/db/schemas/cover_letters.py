from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict, Field

from .base import CamelModel, InputModel


class CoverLetterBase(InputModel):
    title: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
    company_name: Optional[str] = None
    job_description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    content: str = Field(min_length=1)
    status: Optional[str] = None


class CoverLetterCreate(CoverLetterBase):
    id: Optional[str] = Field(default=None, min_length=1)


class CoverLetterUpdate(InputModel):
    title: Optional[str] = Field(default=None, min_length=1)
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    job_description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    content: Optional[str] = None
    status: Optional[str] = None


class CoverLetter(CamelModel):
    id: str
    user_id: str
    title: str
    job_title: str
    company_name: Optional[str] = None
    job_description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    content: str
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CoverLetterResult(CamelModel):
    cover_letter: CoverLetter


class CoverLetterListResult(CamelModel):
    cover_letters: List[CoverLetter]
