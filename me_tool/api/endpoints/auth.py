import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from me_tool.api.deps import (
    create_session,
    get_db,
    get_session_codec,
    get_user_id,
    logout_response,
    parse_form,
    read_form,
    safe_redirect_target,
)
from me_tool.api.responses import render_page
from me_tool.core.exceptions import BadRequest, PersistenceError, ValidationFailed
from me_tool.core.permissions import require_user
from me_tool.core.security import SessionCodec
from me_tool.crud.staff import staff as staff_crud
from me_tool.schemas.auth import LoginForm
from me_tool.schemas.staff import SafeStaff

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.get("/login")
def login_page(
    request: Request,
    redirectTo: Optional[str] = None,
    user_id: Optional[str] = Depends(get_user_id),
):
    if user_id:
        return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return render_page(
        request,
        "login.html",
        {"redirectTo": safe_redirect_target(redirectTo), "error": None},
    )


@router.post("/login")
async def login(
    request: Request,
    db: Session = Depends(get_db),
    codec: SessionCodec = Depends(get_session_codec),
):
    """
    Signs a staff member in and redirects to ``redirectTo``.
    """
    try:
        form = parse_form(LoginForm, await read_form(request))
    except ValidationFailed:
        raise BadRequest("Invalid form submission")

    logger.info("Login attempt for %s", form.email)
    try:
        staff = staff_crud.authenticate(db, email=form.email, password=form.password)
    except SQLAlchemyError as exc:
        logger.exception("Error during login")
        raise PersistenceError("An error occurred during login") from exc

    if staff is None:
        raise BadRequest(INVALID_CREDENTIALS)

    return create_session(codec, staff.id, safe_redirect_target(form.redirect_to))


@router.post("/logout")
def logout(
    current_user: SafeStaff = Depends(require_user),
    codec: SessionCodec = Depends(get_session_codec),
):
    logger.info("Staff %s signed out", current_user.id)
    return logout_response(codec)
