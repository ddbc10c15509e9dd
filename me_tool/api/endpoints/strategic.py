from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_db, parse_form, read_form
from me_tool.api.responses import created_response, render_page, serialize
from me_tool.core.permissions import is_admin, require_admin, require_user
from me_tool.crud.strategic import strategic_objective as strategic_objective_crud
from me_tool.crud.team import team as team_crud
from me_tool.schemas.staff import SafeStaff
from me_tool.schemas.strategic import StrategicObjectiveCreate, StrategicObjectiveResponse
from me_tool.schemas.team import TeamResponse

router = APIRouter(prefix="/strategy", tags=["strategy"])


@router.get("")
def list_strategic_objectives(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    """
    Strategic objectives with their responsible team, plus the teams for the form.
    """
    objectives = strategic_objective_crud.list_with_team(db)
    return render_page(
        request,
        "strategy.html",
        {
            "strategicObjectives": serialize(StrategicObjectiveResponse, objectives),
            "teams": serialize(TeamResponse, team_crud.list_names(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("")
async def create_strategic_objective(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    obj_in = parse_form(StrategicObjectiveCreate, await read_form(request))
    objective = strategic_objective_crud.create(db, obj_in=obj_in)
    return created_response(
        request,
        StrategicObjectiveResponse.model_validate(objective),
        message="Strategic objective created",
    )
