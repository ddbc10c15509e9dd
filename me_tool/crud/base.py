from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from me_tool.core.exceptions import PersistenceError, ValidationFailed

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    """Read and create operations over one SQLAlchemy model.

    Records are created once and only read afterwards, so there is no update
    or delete here. Store failures roll the session back and surface as
    ``PersistenceError``; nothing is retried.
    """

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model

    def get(self, db: Session, *, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        query = db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        return self.save(db, db_obj)

    def save(self, db: Session, db_obj: ModelType) -> ModelType:
        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Could not persist %s", self.model.__name__)
            raise PersistenceError(str(exc)) from exc
        return db_obj

    def require_related(
        self,
        db: Session,
        model: Type[Any],
        id: Any,
        *,
        path: str,
        message: str,
    ) -> None:
        """Rejects the submission when a referenced record does not exist."""
        if db.query(model.id).filter(model.id == id).first() is None:
            raise ValidationFailed.single(path, message)
