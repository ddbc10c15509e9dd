import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from me_tool.api.deps import logout_response
from me_tool.api.responses import ApiResponseTemplate, templates, wants_html
from me_tool.core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    AuthenticationRequired,
    AuthorizationDenied,
    BadRequest,
    PersistenceError,
    SessionInvalid,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


def _respond(
    request: Request,
    status_code: int,
    payload: Dict[str, Any],
    errors: Optional[List[Dict[str, str]]] = None,
) -> Response:
    if wants_html(request):
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "status_code": status_code,
                "message": payload.get("error"),
                "errors": errors or [],
                "back_url": request.url.path,
            },
            status_code=status_code,
        )
    return JSONResponse(payload, status_code=status_code)


async def authentication_required_handler(request: Request, exc: AuthenticationRequired) -> Response:
    logger.info("Unauthenticated %s %s redirected to login", request.method, request.url.path)
    return RedirectResponse(url=exc.login_url, status_code=exc.status_code)


async def session_invalid_handler(request: Request, exc: SessionInvalid) -> Response:
    logger.warning("Invalid session on %s %s: %s", request.method, request.url.path, exc.detail)
    return logout_response(request.app.state.session_codec)


async def authorization_denied_handler(request: Request, exc: AuthorizationDenied) -> Response:
    logger.warning("Denied %s %s: %s", request.method, request.url.path, exc.detail)
    return _respond(request, exc.status_code, exc.payload())


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> Response:
    logger.info(
        "Rejected %s %s: %s",
        request.method,
        request.url.path,
        "; ".join(f"{error.path}: {error.message}" for error in exc.errors),
    )
    payload = exc.payload()
    return _respond(request, exc.status_code, payload, errors=payload["errors"])


async def bad_request_handler(request: Request, exc: BadRequest) -> Response:
    logger.info("Bad request %s %s: %s", request.method, request.url.path, exc.detail)
    return _respond(request, exc.status_code, exc.payload())


async def persistence_error_handler(request: Request, exc: PersistenceError) -> Response:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc.detail)
    return _respond(request, exc.status_code, exc.payload())


async def unexpected_error_handler(request: Request, exc: Exception) -> Response:
    logger.exception("API Error on %s %s", request.method, request.url.path, exc_info=exc)
    message = str(exc) or GENERIC_ERROR_MESSAGE
    return _respond(request, 500, ApiResponseTemplate.error(message))


EXCEPTION_HANDLERS = {
    AuthenticationRequired: authentication_required_handler,
    SessionInvalid: session_invalid_handler,
    AuthorizationDenied: authorization_denied_handler,
    ValidationFailed: validation_failed_handler,
    BadRequest: bad_request_handler,
    PersistenceError: persistence_error_handler,
    Exception: unexpected_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)
