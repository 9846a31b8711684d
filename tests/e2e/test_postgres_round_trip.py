"""End-to-end check against a real Postgres with the Alembic schema.

Runs only with RUN_E2E=1 (needs Docker for testcontainers).
"""
import os
import time

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from letterdesk.db import schemas
from letterdesk.services import CallerContext, CoverLetterService, NotFoundError, TemplateService

pytestmark = pytest.mark.skipif(os.getenv("RUN_E2E") != "1", reason="set RUN_E2E=1 to run Postgres e2e tests")


@pytest.fixture(scope="module")
def pg_session():
    from alembic import command
    from alembic.config import Config
    from testcontainers.postgres import PostgresContainer

    image = os.getenv("TEST_POSTGRES_IMAGE", "postgres:16-alpine")
    with PostgresContainer(image) as pg:
        url = pg.get_connection_url()
        cfg = Config("alembic.ini")
        cfg.set_main_option("sqlalchemy.url", url)
        os.environ["TEST_DATABASE_URL"] = url
        try:
            command.upgrade(cfg, "head")
            engine = create_engine(url, future=True)
            session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
            try:
                yield session
            finally:
                session.close()
                engine.dispose()
        finally:
            os.environ.pop("TEST_DATABASE_URL", None)


def test_cover_letter_lifecycle_on_postgres(pg_session):
    alice = CallerContext(id="alice")
    bob = CallerContext(id="bob")
    service = CoverLetterService(pg_session)

    letter = service.create_cover_letter(
        alice, schemas.CoverLetterCreate(title="SWE Application", job_title="Engineer", content="Hi")
    ).cover_letter
    assert letter.created_at.tzinfo is not None
    time.sleep(0.01)

    with pytest.raises(NotFoundError):
        service.update_cover_letter(bob, letter.id, schemas.CoverLetterUpdate(status="submitted"))

    updated = service.update_cover_letter(alice, letter.id, schemas.CoverLetterUpdate(status="submitted")).cover_letter
    assert updated.status == "submitted"
    assert updated.updated_at > letter.updated_at
    assert updated.created_at == letter.created_at

    assert service.delete_cover_letter(alice, letter.id).cover_letter.id == letter.id


def test_template_visibility_on_postgres(pg_session):
    service = TemplateService(pg_session)
    alice = CallerContext(id="alice-tpl")
    bob = CallerContext(id="bob-tpl")
    system = service.create_template(alice, schemas.TemplateCreate(name="S", body="b", is_system=True)).template
    own = service.create_template(bob, schemas.TemplateCreate(name="B", body="b")).template

    visible = {t.id for t in service.list_templates(alice).templates}
    assert system.id in visible
    assert own.id not in visible
