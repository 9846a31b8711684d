"""
FastAPI app assembly: logging, middleware, error mapping and router wiring.
"""
import logging
import os
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from letterdesk.db.database import init_sqlite_schema
from letterdesk.api.cover_letters import router as cover_letters_router
from letterdesk.api.templates import router as templates_router
from letterdesk.services.errors import ActionError, UNAUTHORIZED, NOT_FOUND
from letterdesk.utils.runtime import cors_origins

# Postgres schema is managed by Alembic migrations; local SQLite files are
# created on the fly.
init_sqlite_schema()

app = FastAPI(
    title="Cover Letter Service",
    description="API for storing cover letters and reusable cover letter templates per user.",
    version="1.0.0",
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_CODE = {
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError):
    status_code = _STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.debug("action_error: path=%s code=%s", request.url.path, exc.code)
    return JSONResponse(exc.to_dict(), status_code=status_code)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(cover_letters_router)
app.include_router(templates_router)
