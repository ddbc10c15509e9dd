from typing import List

from sqlalchemy.orm import Session, joinedload

from me_tool.crud.base import CRUDBase
from me_tool.models.activities import Livelihood, Workshop
from me_tool.models.project import Project
from me_tool.schemas.activities import LivelihoodCreate, WorkshopCreate

PROJECT_NOT_FOUND = "Selected project does not exist"


class CRUDWorkshop(CRUDBase[Workshop, WorkshopCreate]):
    def list_with_project(self, db: Session) -> List[Workshop]:
        return (
            db.query(Workshop)
            .options(joinedload(Workshop.project))
            .order_by(Workshop.id)
            .all()
        )

    def create(self, db: Session, *, obj_in: WorkshopCreate) -> Workshop:
        self.require_related(db, Project, obj_in.project_id, path="projectId", message=PROJECT_NOT_FOUND)
        return super().create(db, obj_in=obj_in)


class CRUDLivelihood(CRUDBase[Livelihood, LivelihoodCreate]):
    def list_with_project(self, db: Session) -> List[Livelihood]:
        return (
            db.query(Livelihood)
            .options(joinedload(Livelihood.project))
            .order_by(Livelihood.id)
            .all()
        )

    def create(self, db: Session, *, obj_in: LivelihoodCreate) -> Livelihood:
        self.require_related(db, Project, obj_in.project_id, path="projectId", message=PROJECT_NOT_FOUND)
        return super().create(db, obj_in=obj_in)


workshop = CRUDWorkshop(Workshop)
livelihood = CRUDLivelihood(Livelihood)
