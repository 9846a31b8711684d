"""
App assembly entry point.

Re-exports the FastAPI `app` from `letterdesk.api.main` so `uvicorn app:app`
works from the project root.
"""

from letterdesk.api.main import app  # noqa: F401
