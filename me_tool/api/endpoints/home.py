from typing import Optional

from fastapi import APIRouter, Depends, Request

from me_tool.api.deps import get_optional_user
from me_tool.api.responses import render_page
from me_tool.core.permissions import is_admin
from me_tool.schemas.staff import SafeStaff

router = APIRouter(tags=["home"])

SECTIONS = [
    {"path": "/strategy", "title": "Strategic Objectives"},
    {"path": "/project", "title": "Projects"},
    {"path": "/workshop", "title": "Workshops"},
    {"path": "/livelihood", "title": "Livelihoods"},
    {"path": "/team", "title": "Teams"},
    {"path": "/staff", "title": "Staff"},
]


@router.get("/")
def index(request: Request, user: Optional[SafeStaff] = Depends(get_optional_user)):
    return render_page(
        request,
        "index.html",
        {
            "user": user.to_payload() if user else None,
            "isAdmin": is_admin(user),
            "sections": SECTIONS if user else [],
        },
    )
