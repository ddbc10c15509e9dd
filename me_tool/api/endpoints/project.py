from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from me_tool.api.deps import get_db, parse_form, read_form
from me_tool.api.responses import created_response, render_page, serialize
from me_tool.core.permissions import is_admin, require_admin, require_user
from me_tool.crud.project import project as project_crud
from me_tool.crud.strategic import strategic_objective as strategic_objective_crud
from me_tool.crud.team import team as team_crud
from me_tool.schemas.project import ProjectCreate, ProjectResponse
from me_tool.schemas.staff import SafeStaff
from me_tool.schemas.strategic import StrategicObjectiveOption
from me_tool.schemas.team import TeamResponse

router = APIRouter(prefix="/project", tags=["project"])


@router.get("")
def list_projects(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_user),
):
    projects = project_crud.list_with_relations(db)
    return render_page(
        request,
        "project.html",
        {
            "projects": serialize(ProjectResponse, projects),
            "strategicObjectives": serialize(
                StrategicObjectiveOption, strategic_objective_crud.get_multi(db)
            ),
            "teams": serialize(TeamResponse, team_crud.list_names(db)),
            "user": current_user.to_payload(),
            "isAdmin": is_admin(current_user),
        },
    )


@router.post("")
async def create_project(
    request: Request,
    db: Session = Depends(get_db),
    current_user: SafeStaff = Depends(require_admin),
):
    """
    Creates a project. Progress is computed here from the validated KPI pair.
    """
    obj_in = parse_form(ProjectCreate, await read_form(request))
    project = project_crud.create(db, obj_in=obj_in)
    return created_response(
        request,
        ProjectResponse.model_validate(project),
        message="Project created",
    )
