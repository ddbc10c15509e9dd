from typing import List

from sqlalchemy.orm import Session

from me_tool.crud.base import CRUDBase
from me_tool.models.team import Team
from me_tool.schemas.team import TeamCreate


class CRUDTeam(CRUDBase[Team, TeamCreate]):
    def create_with_owner(self, db: Session, *, obj_in: TeamCreate, created_by_id: str) -> Team:
        db_obj = Team(name=obj_in.name, created_by_id=created_by_id)
        return self.save(db, db_obj)

    def list_names(self, db: Session) -> List[Team]:
        return db.query(Team).order_by(Team.name, Team.id).all()


team = CRUDTeam(Team)
