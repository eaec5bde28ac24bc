"""Generic SQLAlchemy repository shared by the doctor, patient and
appointment repositories.

Subclasses set ``model`` (the table) and ``entity`` (the domain dataclass);
field names are identical on both sides, so mapping is by name.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from healthcare.core.exceptions import EntityNotFoundError
from healthcare.domain.entities import mutable_fields

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class SQLAlchemyRepository(Generic[EntityT]):
    """CRUD and filtered queries over a single table."""

    model: Type[Any]
    entity: Type[EntityT]

    def __init__(self, db_session) -> None:
        self.db = db_session

    @property
    def entity_name(self) -> str:
        return self.entity.__name__

    def get_by_id(self, entity_id: str) -> Optional[EntityT]:
        db_obj = self.db.get(self.model, entity_id)
        return self._to_domain(db_obj) if db_obj else None

    def get_all(self) -> List[EntityT]:
        return [self._to_domain(obj) for obj in self.db.query(self.model).all()]

    def exists(self, entity_id: str) -> bool:
        query = self.db.query(self.model).filter_by(id=entity_id).exists()
        return bool(self.db.query(query).scalar())

    def create(self, entity: EntityT) -> EntityT:
        # id is left to the column default
        db_obj = self.model(
            **{name: getattr(entity, name) for name in mutable_fields(self.entity)}
        )
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return self._to_domain(db_obj)

    def update(self, entity: EntityT) -> EntityT:
        entity_id = getattr(entity, "id", None)
        if not entity_id:
            raise ValueError(f"{self.entity_name} ID is required for update")

        db_obj = self.db.get(self.model, entity_id)
        if not db_obj:
            raise EntityNotFoundError(self.entity_name, entity_id)

        for name in mutable_fields(self.entity):
            setattr(db_obj, name, getattr(entity, name))
        self._commit()
        self.db.refresh(db_obj)
        return self._to_domain(db_obj)

    def delete_by_id(self, entity_id: str) -> None:
        self.db.query(self.model).filter_by(id=entity_id).delete()
        self._commit()

    def find(self, *criteria) -> List[EntityT]:
        db_objs = self.db.query(self.model).filter(*criteria).all()
        return [self._to_domain(obj) for obj in db_objs]

    def find_one(self, *criteria) -> Optional[EntityT]:
        db_obj = self.db.query(self.model).filter(*criteria).first()
        return self._to_domain(db_obj) if db_obj else None

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(
                f"{self.entity_name} commit failed, session rolled back",
                exc_info=True,
            )
            raise

    def _to_domain(self, db_obj) -> EntityT:
        """Convert DB model to domain entity."""
        values = {name: getattr(db_obj, name) for name in mutable_fields(self.entity)}
        return self.entity(id=db_obj.id, **values)
