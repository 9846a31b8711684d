"""
Template actions. System templates (no owner) are shared by every caller;
user templates are visible only to their owner.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from letterdesk.db import models, schemas
from letterdesk.db.repositories import templates as template_repo
from letterdesk.services.context import CallerContext, require_caller, supplied_fields
from letterdesk.services.errors import NotFoundError

logger = logging.getLogger(__name__)

TEMPLATE_NOT_FOUND = "Template not found or not accessible."


def is_visible_to(template: models.CoverLetterTemplate, user_id: str) -> bool:
    return template.user_id is None or template.user_id == user_id


class TemplateService:
    """Access to ``cover_letter_templates`` for a single caller."""

    def __init__(self, db: Session):
        self.db = db

    def create_template(self, caller: Optional[CallerContext], data: schemas.TemplateCreate) -> schemas.TemplateResult:
        user = require_caller(caller)
        is_system = bool(data.is_system)
        values = data.model_dump(exclude={"id", "is_system"})
        values.update(
            id=data.id if data.id is not None else models.new_record_id(),
            user_id=None if is_system else user.id,
            is_system=is_system,
            created_at=models.now_utc(),
        )
        template = template_repo.create_template(self.db, values)
        logger.info("template_created: id=%s user=%s system=%s", template.id, user.id, is_system)
        return schemas.TemplateResult(template=schemas.Template.model_validate(template))

    def update_template(
        self,
        caller: Optional[CallerContext],
        template_id: str,
        data: schemas.TemplateUpdate,
    ) -> schemas.TemplateResult:
        """Merge the supplied fields into a template the caller can see.

        Unowned (system) templates pass the check for any caller.
        """
        user = require_caller(caller)
        existing = template_repo.get_template(self.db, template_id)
        if existing is None or not is_visible_to(existing, user.id):
            logger.warning("template_not_accessible: id=%s user=%s", template_id, user.id)
            raise NotFoundError(TEMPLATE_NOT_FOUND)

        changes = supplied_fields(data)
        if not changes:
            return schemas.TemplateResult(template=schemas.Template.model_validate(existing))

        template = template_repo.update_template(self.db, template_id, changes)
        if template is None:
            raise NotFoundError(TEMPLATE_NOT_FOUND)
        logger.info("template_updated: id=%s user=%s fields=%s", template.id, user.id, sorted(changes))
        return schemas.TemplateResult(template=schemas.Template.model_validate(template))

    def list_templates(self, caller: Optional[CallerContext]) -> schemas.TemplateListResult:
        user = require_caller(caller)
        templates = template_repo.get_templates(self.db)
        visible = [t for t in templates if is_visible_to(t, user.id)]
        return schemas.TemplateListResult(templates=[schemas.Template.model_validate(t) for t in visible])
