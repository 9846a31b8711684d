"""Caller identity passed explicitly into every action handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from letterdesk.services.errors import UnauthorizedError


@dataclass(frozen=True)
class CallerContext:
    id: str
    email: Optional[str] = None


def require_caller(caller: Optional[CallerContext]) -> CallerContext:
    """Return the caller or raise ``UnauthorizedError`` when there is none."""
    if caller is None or not caller.id:
        raise UnauthorizedError()
    return caller


def supplied_fields(payload) -> dict:
    """Fields the client actually sent; omitted fields leave stored values untouched."""
    return payload.model_dump(exclude_unset=True)
