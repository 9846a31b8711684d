from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict, Field

from .base import CamelModel, InputModel


class TemplateBase(InputModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    body: str = Field(min_length=1)


class TemplateCreate(TemplateBase):
    id: Optional[str] = Field(default=None, min_length=1)
    is_system: Optional[bool] = None


class TemplateUpdate(InputModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    body: Optional[str] = None
    is_system: Optional[bool] = None


class Template(CamelModel):
    id: str
    user_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    tone: Optional[str] = None
    language: Optional[str] = None
    body: str
    is_system: bool
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class TemplateResult(CamelModel):
    template: Template


class TemplateListResult(CamelModel):
    templates: List[Template]
