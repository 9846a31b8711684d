"""
Cover letter actions: create, read, update, list and delete a caller's
cover letters.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from letterdesk.db import models, schemas
from letterdesk.db.repositories import cover_letters as cover_letter_repo
from letterdesk.services.context import CallerContext, require_caller, supplied_fields
from letterdesk.services.errors import NotFoundError

logger = logging.getLogger(__name__)

COVER_LETTER_NOT_FOUND = "Cover letter not found."


class CoverLetterService:
    """Ownership-scoped access to the ``cover_letters`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create_cover_letter(
        self, caller: Optional[CallerContext], data: schemas.CoverLetterCreate
    ) -> schemas.CoverLetterResult:
        user = require_caller(caller)
        now = models.now_utc()
        values = data.model_dump(exclude={"id"})
        values.update(
            id=data.id if data.id is not None else models.new_record_id(),
            user_id=user.id,
            created_at=now,
            updated_at=now,
        )
        cover_letter = cover_letter_repo.create_cover_letter(self.db, values)
        logger.info("cover_letter_created: id=%s user=%s", cover_letter.id, user.id)
        return schemas.CoverLetterResult(cover_letter=schemas.CoverLetter.model_validate(cover_letter))

    def get_cover_letter(self, caller: Optional[CallerContext], cover_letter_id: str) -> schemas.CoverLetterResult:
        user = require_caller(caller)
        cover_letter = cover_letter_repo.get_cover_letter(self.db, cover_letter_id, user.id)
        if cover_letter is None:
            logger.warning("cover_letter_not_found: id=%s user=%s", cover_letter_id, user.id)
            raise NotFoundError(COVER_LETTER_NOT_FOUND)
        return schemas.CoverLetterResult(cover_letter=schemas.CoverLetter.model_validate(cover_letter))

    def update_cover_letter(
        self,
        caller: Optional[CallerContext],
        cover_letter_id: str,
        data: schemas.CoverLetterUpdate,
    ) -> schemas.CoverLetterResult:
        """Merge the supplied fields into an owned cover letter.

        With nothing supplied the stored row is returned as-is and its
        ``updated_at`` is left alone.
        """
        user = require_caller(caller)
        existing = cover_letter_repo.get_cover_letter(self.db, cover_letter_id, user.id)
        if existing is None:
            logger.warning("cover_letter_not_found: id=%s user=%s", cover_letter_id, user.id)
            raise NotFoundError(COVER_LETTER_NOT_FOUND)

        changes = supplied_fields(data)
        if not changes:
            return schemas.CoverLetterResult(cover_letter=schemas.CoverLetter.model_validate(existing))

        changes["updated_at"] = models.now_utc()
        cover_letter = cover_letter_repo.update_cover_letter(self.db, cover_letter_id, user.id, changes)
        if cover_letter is None:
            # Row vanished between the ownership check and the write
            raise NotFoundError(COVER_LETTER_NOT_FOUND)
        logger.info(
            "cover_letter_updated: id=%s user=%s fields=%s",
            cover_letter.id, user.id, sorted(k for k in changes if k != "updated_at"),
        )
        return schemas.CoverLetterResult(cover_letter=schemas.CoverLetter.model_validate(cover_letter))

    def list_cover_letters(self, caller: Optional[CallerContext]) -> schemas.CoverLetterListResult:
        user = require_caller(caller)
        cover_letters = cover_letter_repo.get_cover_letters_by_user(self.db, user.id)
        return schemas.CoverLetterListResult(
            cover_letters=[schemas.CoverLetter.model_validate(c) for c in cover_letters]
        )

    def delete_cover_letter(self, caller: Optional[CallerContext], cover_letter_id: str) -> schemas.CoverLetterResult:
        user = require_caller(caller)
        deleted = cover_letter_repo.delete_cover_letter(self.db, cover_letter_id, user.id)
        if deleted is None:
            logger.warning("cover_letter_not_found: id=%s user=%s", cover_letter_id, user.id)
            raise NotFoundError(COVER_LETTER_NOT_FOUND)
        logger.info("cover_letter_deleted: id=%s user=%s", cover_letter_id, user.id)
        return schemas.CoverLetterResult(cover_letter=schemas.CoverLetter.model_validate(deleted))
