import logging
from typing import Any, Dict, Mapping, Optional, Type

from fastapi import Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from me_tool.core.exceptions import (
    LOGIN_PATH,
    AuthenticationRequired,
    BadRequest,
    SessionInvalid,
    ValidationFailed,
)
from me_tool.core.security import SessionCodec
from me_tool.crud.staff import staff as staff_crud
from me_tool.database import get_db
from me_tool.schemas.base import SchemaType, decode_form
from me_tool.schemas.staff import SafeStaff

logger = logging.getLogger(__name__)


def get_session_codec(request: Request) -> SessionCodec:
    return request.app.state.session_codec


def get_user_id(
    request: Request,
    codec: SessionCodec = Depends(get_session_codec),
) -> Optional[str]:
    """User id from a verified session cookie, or None. Never raises."""
    return codec.read_user_id(request)


def require_user_id(request: Request, codec: SessionCodec) -> str:
    user_id = codec.read_user_id(request)
    if not user_id:
        raise AuthenticationRequired(redirect_to=request.url.path)
    return user_id


def load_user(db: Session, user_id: str) -> SafeStaff:
    """Resolves a session's user id, treating any failure as an invalid session."""
    try:
        staff = staff_crud.get(db, id=user_id)
    except SQLAlchemyError:
        logger.exception("Error fetching user %s", user_id)
        raise SessionInvalid()
    if staff is None:
        logger.warning("Session refers to missing user %s", user_id)
        raise SessionInvalid()
    return SafeStaff.model_validate(staff)


def get_optional_user(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_user_id),
) -> Optional[SafeStaff]:
    if user_id is None:
        return None
    return load_user(db, user_id)


async def read_form(request: Request) -> Dict[str, Any]:
    """Submitted fields as a plain mapping; JSON bodies are accepted as well."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise BadRequest("Invalid form submission")
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def create_session(codec: SessionCodec, user_id: str, redirect_to: str) -> RedirectResponse:
    response = RedirectResponse(url=redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    codec.commit(response, user_id)
    return response


def logout_response(codec: SessionCodec) -> RedirectResponse:
    response = RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    codec.destroy(response)
    response.headers["Clear-Site-Data"] = '"cookies", "storage"'
    return response


def safe_redirect_target(target: Optional[str], default: str = "/") -> str:
    """Only same-site relative paths are followed after login."""
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    return target


def parse_form(schema: Type[SchemaType], raw: Mapping[str, Any]) -> SchemaType:
    """Decodes submitted fields, turning a rejection into ``ValidationFailed``."""
    result = decode_form(schema, raw)
    if not result.ok:
        raise ValidationFailed(result.errors)
    return result.record
