from pathlib import Path
from typing import Any, Dict, Iterable, List, Type

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from me_tool.models.enums import AGE_GROUP_LABELS, AgeGroup, Role, Sex, Status
from me_tool.schemas.base import ResponseSchema

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    statuses=[item.value for item in Status],
    roles=[item.value for item in Role],
    sexes=[item.value for item in Sex],
    age_groups=[(item.value, AGE_GROUP_LABELS[item]) for item in AgeGroup],
)


def wants_html(request: Request) -> bool:
    """Browsers get rendered pages; API clients get JSON."""
    return "text/html" in request.headers.get("accept", "")


def serialize(schema: Type[ResponseSchema], items: Iterable[Any]) -> List[Dict[str, Any]]:
    return [schema.model_validate(item).to_payload() for item in items]


class ApiResponseTemplate:
    """Shapes the JSON payloads handed back to callers."""

    @staticmethod
    def success(
        data: Any = None,
        message: str = "OK",
    ) -> Dict[str, Any]:
        return {"success": True, "data": data, "message": message}

    @staticmethod
    def error(message: str) -> Dict[str, Any]:
        return {"success": False, "error": message}


def render_page(
    request: Request,
    template_name: str,
    context: Dict[str, Any],
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Renders a page for browsers, or the same context as JSON for API clients."""
    if not wants_html(request):
        return JSONResponse(
            ApiResponseTemplate.success(data=jsonable_encoder(context)),
            status_code=status_code,
        )
    return templates.TemplateResponse(request, template_name, context, status_code=status_code)


def created_response(request: Request, record: ResponseSchema, message: str) -> Response:
    """201 with the new record; browsers are sent back to the page instead."""
    if wants_html(request):
        return RedirectResponse(url=request.url.path, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse(
        ApiResponseTemplate.success(data=record.to_payload(), message=message),
        status_code=status.HTTP_201_CREATED,
    )
