"""
Typed errors raised by the action handlers.

Each error carries a machine-readable ``code`` and a human-readable
``message``; the API layer maps codes to HTTP statuses.
"""

UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"


class ActionError(Exception):
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class UnauthorizedError(ActionError):
    code = UNAUTHORIZED

    def __init__(self, message: str = "You must be signed in to perform this action."):
        super().__init__(message)


class NotFoundError(ActionError):
    code = NOT_FOUND
