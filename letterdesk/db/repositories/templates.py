"""
Cover letter template repository functions.

Templates are addressed by id alone; visibility and ownership decisions are
made by the caller.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from letterdesk.db import models


def create_template(db: Session, values: Dict[str, Any]) -> models.CoverLetterTemplate:
    db_template = models.CoverLetterTemplate(**values)
    try:
        db.add(db_template)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_template)
    return db_template


def get_template(db: Session, template_id: str) -> Optional[models.CoverLetterTemplate]:
    return (
        db.query(models.CoverLetterTemplate)
        .filter(models.CoverLetterTemplate.id == template_id)
        .limit(1)
        .first()
    )


def get_templates(db: Session) -> List[models.CoverLetterTemplate]:
    return db.query(models.CoverLetterTemplate).all()


def update_template(db: Session, template_id: str, changes: Dict[str, Any]) -> Optional[models.CoverLetterTemplate]:
    db_template = get_template(db, template_id)
    if db_template is None:
        return None
    for key, value in changes.items():
        setattr(db_template, key, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_template)
    return db_template
