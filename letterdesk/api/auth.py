"""
Authentication helpers and identity resolution.

The service sits behind an identity-aware proxy; the caller's stable user id
and email arrive as request headers. Users are never stored here.
"""
from typing import Optional, Tuple

from letterdesk.services.context import CallerContext
from letterdesk.utils.runtime import dev_mode_active

DEV_USER_ID = "dev"
DEV_USER_EMAIL = "dev@localhost"


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower()


def resolve_identity_from_headers(
    x_auth_request_user: Optional[str],
    x_auth_request_email: Optional[str],
    x_forwarded_user: Optional[str],
    x_forwarded_email: Optional[str],
) -> Tuple[Optional[str], Optional[str]]:
    user = (x_auth_request_user or x_forwarded_user or "").strip() or None
    email = _normalize_email(x_auth_request_email or x_forwarded_email)
    return user, email


def caller_from_headers(
    x_auth_request_user: Optional[str] = None,
    x_auth_request_email: Optional[str] = None,
    x_forwarded_user: Optional[str] = None,
    x_forwarded_email: Optional[str] = None,
) -> Optional[CallerContext]:
    """Build the caller context, or ``None`` for an anonymous request."""
    if dev_mode_active():
        return CallerContext(id=DEV_USER_ID, email=DEV_USER_EMAIL)
    user_id, email = resolve_identity_from_headers(
        x_auth_request_user=x_auth_request_user,
        x_auth_request_email=x_auth_request_email,
        x_forwarded_user=x_forwarded_user,
        x_forwarded_email=x_forwarded_email,
    )
    if not user_id:
        return None
    return CallerContext(id=user_id, email=email)
