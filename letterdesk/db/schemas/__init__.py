"""
Pydantic schemas for cover letters and templates.

Input models validate action payloads; the ``*Result`` models are the
response envelopes returned by the action handlers.
"""

from .base import CamelModel, InputModel
from .cover_letters import (
    CoverLetterBase,
    CoverLetterCreate,
    CoverLetterUpdate,
    CoverLetter,
    CoverLetterResult,
    CoverLetterListResult,
)
from .templates import (
    TemplateBase,
    TemplateCreate,
    TemplateUpdate,
    Template,
    TemplateResult,
    TemplateListResult,
)

__all__ = [
    "CamelModel",
    "InputModel",
    # Cover letters
    "CoverLetterBase",
    "CoverLetterCreate",
    "CoverLetterUpdate",
    "CoverLetter",
    "CoverLetterResult",
    "CoverLetterListResult",
    # Templates
    "TemplateBase",
    "TemplateCreate",
    "TemplateUpdate",
    "Template",
    "TemplateResult",
    "TemplateListResult",
]
