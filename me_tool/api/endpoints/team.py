from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_db, parse_form, read_form
from me_tool.api.responses import created_response, render_page, serialize
from me_tool.core.permissions import is_admin, require_admin, require_user
from me_tool.crud.team import team as team_crud
from me_tool.schemas.staff import SafeStaff
from me_tool.schemas.team import TeamCreate, TeamResponse

router = APIRouter(prefix="/team", tags=["team"])


@router.get("")
def list_teams(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    return render_page(
        request,
        "team.html",
        {
            "teams": serialize(TeamResponse, team_crud.get_multi(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("")
async def create_team(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    obj_in = parse_form(TeamCreate, await read_form(request))
    team = team_crud.create_with_owner(db, obj_in=obj_in, created_by_id=current_user.id)
    return created_response(request, TeamResponse.model_validate(team), message="Team created")
