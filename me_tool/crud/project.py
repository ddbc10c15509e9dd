from typing import List

from sqlalchemy.orm import Session, joinedload

from me_tool.crud.base import CRUDBase
from me_tool.models.project import Project
from me_tool.models.strategic import StrategicObjective
from me_tool.models.team import Team
from me_tool.schemas.project import ProjectCreate


class CRUDProject(CRUDBase[Project, ProjectCreate]):
    def list_with_relations(self, db: Session) -> List[Project]:
        return (
            db.query(Project)
            .options(
                joinedload(Project.strategic_objective),
                joinedload(Project.responsible_team),
            )
            .order_by(Project.id)
            .all()
        )

    def create(self, db: Session, *, obj_in: ProjectCreate) -> Project:
        self.require_related(
            db,
            StrategicObjective,
            obj_in.strategic_objective_id,
            path="strategicObjectiveId",
            message="Selected strategic objective does not exist",
        )
        self.require_related(
            db, Team, obj_in.team_id, path="teamId", message="Selected team does not exist"
        )
        db_obj = Project(
            project_name=obj_in.name,
            objective=obj_in.objective,
            strategic_objective_id=obj_in.strategic_objective_id,
            outcome=obj_in.outcome,
            activity=obj_in.activity,
            kpi=obj_in.kpi,
            target_value=obj_in.target_value,
            actual_value=obj_in.actual_value,
            progress_percentage=obj_in.progress_percentage,
            status=obj_in.status,
            team_id=obj_in.team_id,
            timeline=obj_in.timeline,
            last_updated=obj_in.last_updated,
        )
        return self.save(db, db_obj)


project = CRUDProject(Project)
