from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from fastapi import HTTPException, status

from me_tool.schemas.base import FieldError

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
LOGIN_PATH = "/login"


class AppException(HTTPException):
    """Base error for every failure the application answers deliberately."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def payload(self) -> Dict[str, Any]:
        return {"success": False, "error": self.detail}


class AuthenticationRequired(AppException):
    """No valid session on a protected route."""

    def __init__(self, redirect_to: str = "/"):
        self.redirect_to = redirect_to
        super().__init__(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Authentication required",
            headers={"Location": self.login_url},
        )

    @property
    def login_url(self) -> str:
        return f"{LOGIN_PATH}?{urlencode({'redirectTo': self.redirect_to})}"


class SessionInvalid(AppException):
    """The session cookie names a user that can no longer be loaded."""

    def __init__(self, detail: str = "Session is no longer valid"):
        super().__init__(
            status_code=status.HTTP_303_SEE_OTHER,
            detail=detail,
            headers={"Location": LOGIN_PATH},
        )


class AuthorizationDenied(AppException):
    """Authenticated user lacking the role a write requires."""

    def __init__(self, detail: str = "Not authorized"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationFailed(AppException):
    """Form input rejected by a schema or a reference check."""

    def __init__(self, errors: List[FieldError], detail: str = "Validation failed"):
        self.errors = list(errors)
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    @classmethod
    def single(cls, path: str, message: str) -> "ValidationFailed":
        return cls([FieldError(path=path, message=message)])

    def payload(self) -> Dict[str, Any]:
        return {
            "success": False,
            "errors": [error.to_dict() for error in self.errors],
        }


class BadRequest(AppException):
    """Malformed submission that is not tied to a single field."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class PersistenceError(AppException):
    """The data store refused or failed a read or write."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail or GENERIC_ERROR_MESSAGE,
        )
