"""
Cover letter repository functions.

Every read and write is scoped by the ownership predicate (id plus owning
user id). Write helpers commit and return the affected row, or ``None`` when
no owned row matched.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from letterdesk.db import models


def create_cover_letter(db: Session, values: Dict[str, Any]) -> models.CoverLetter:
    db_cover_letter = models.CoverLetter(**values)
    try:
        db.add(db_cover_letter)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_cover_letter)
    return db_cover_letter


def get_cover_letter(db: Session, cover_letter_id: str, user_id: str) -> Optional[models.CoverLetter]:
    return (
        db.query(models.CoverLetter)
        .filter(
            models.CoverLetter.id == cover_letter_id,
            models.CoverLetter.user_id == user_id,
        )
        .limit(1)
        .first()
    )


def get_cover_letters_by_user(db: Session, user_id: str) -> List[models.CoverLetter]:
    return db.query(models.CoverLetter).filter(models.CoverLetter.user_id == user_id).all()


def update_cover_letter(
    db: Session,
    cover_letter_id: str,
    user_id: str,
    changes: Dict[str, Any],
) -> Optional[models.CoverLetter]:
    db_cover_letter = get_cover_letter(db, cover_letter_id, user_id)
    if db_cover_letter is None:
        return None
    for key, value in changes.items():
        setattr(db_cover_letter, key, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_cover_letter)
    return db_cover_letter


def delete_cover_letter(db: Session, cover_letter_id: str, user_id: str) -> Optional[models.CoverLetter]:
    """Delete the owned cover letter and return the removed row."""
    db_cover_letter = get_cover_letter(db, cover_letter_id, user_id)
    if db_cover_letter is None:
        return None
    try:
        db.delete(db_cover_letter)
        db.commit()
    except Exception as e:
        db.rollback()
        raise RuntimeError(f"Failed to delete cover letter {cover_letter_id}: {str(e)}") from e
    return db_cover_letter
