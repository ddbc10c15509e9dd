from typing import List

from sqlalchemy.orm import Session, joinedload

from me_tool.crud.base import CRUDBase
from me_tool.models.strategic import StrategicObjective
from me_tool.models.team import Team
from me_tool.schemas.strategic import StrategicObjectiveCreate


class CRUDStrategicObjective(CRUDBase[StrategicObjective, StrategicObjectiveCreate]):
    """Strategic objectives; progress is derived on read, never stored."""

    def list_with_team(self, db: Session) -> List[StrategicObjective]:
        return (
            db.query(StrategicObjective)
            .options(joinedload(StrategicObjective.responsible_team))
            .order_by(StrategicObjective.id)
            .all()
        )

    def create(self, db: Session, *, obj_in: StrategicObjectiveCreate) -> StrategicObjective:
        self.require_related(
            db, Team, obj_in.team_id, path="teamId", message="Selected team does not exist"
        )
        return super().create(db, obj_in=obj_in)


strategic_objective = CRUDStrategicObjective(StrategicObjective)
