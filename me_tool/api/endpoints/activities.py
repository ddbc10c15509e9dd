from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_db, parse_form, read_form
from me_tool.api.responses import created_response, render_page, serialize
from me_tool.core.permissions import is_admin, require_admin, require_user
from me_tool.crud.activities import livelihood as livelihood_crud
from me_tool.crud.activities import workshop as workshop_crud
from me_tool.crud.project import project as project_crud
from me_tool.schemas.activities import (
    LivelihoodCreate,
    LivelihoodResponse,
    WorkshopCreate,
    WorkshopResponse,
)
from me_tool.schemas.project import ProjectOption
from me_tool.schemas.staff import SafeStaff

router = APIRouter(tags=["activities"])


@router.get("/workshop")
def list_workshops(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    return render_page(
        request,
        "workshop.html",
        {
            "workshops": serialize(WorkshopResponse, workshop_crud.list_with_project(db)),
            "projects": serialize(ProjectOption, project_crud.get_multi(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("/workshop")
async def create_workshop(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    obj_in = parse_form(WorkshopCreate, await read_form(request))
    workshop = workshop_crud.create(db, obj_in=obj_in)
    return created_response(
        request,
        WorkshopResponse.model_validate(workshop),
        message="Workshop created",
    )


@router.get("/livelihood")
def list_livelihoods(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    return render_page(
        request,
        "livelihood.html",
        {
            "livelihoods": serialize(LivelihoodResponse, livelihood_crud.list_with_project(db)),
            "projects": serialize(ProjectOption, project_crud.get_multi(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("/livelihood")
async def create_livelihood(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    obj_in = parse_form(LivelihoodCreate, await read_form(request))
    livelihood = livelihood_crud.create(db, obj_in=obj_in)
    return created_response(
        request,
        LivelihoodResponse.model_validate(livelihood),
        message="Livelihood grant recorded",
    )
