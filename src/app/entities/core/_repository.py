"""Generic persistence port shared by all entity repositories.

``Repository`` is the interface handlers program against. ``SqlModelRepository``
implements it once on top of a SQLModel session; each entity package only
binds its entity and table types.

Repositories never commit. The caller owns the unit of work and commits once
all the statements belonging to one operation have been issued.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from src.app.entities.core._base import Entity, EntityTable

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)

Criterion = ColumnElement[bool]


class EntityNotFoundError(ValueError):
    """Raised when a conditional write matched no row."""

    def __init__(self, entity_name: str, entity_id: str) -> None:
        super().__init__(f"{entity_name} with id {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class Repository(ABC, Generic[EntityT]):
    """Persistence port for one entity type."""

    @abstractmethod
    def get(self, entity_id: str) -> EntityT | None:
        """Return the entity with ``entity_id`` or None."""

    @abstractmethod
    def find(self, *criteria: Criterion) -> list[EntityT]:
        """Return every entity matching all ``criteria``."""

    @abstractmethod
    def first(self, *criteria: Criterion) -> EntityT | None:
        """Return one entity matching all ``criteria`` or None."""

    @abstractmethod
    def exists(self, *criteria: Criterion) -> bool:
        """Tell whether at least one entity matches all ``criteria``."""

    @abstractmethod
    def create(self, entity: EntityT) -> EntityT:
        """Insert ``entity`` and return the stored version."""

    @abstractmethod
    def update(self, entity: EntityT, *criteria: Criterion) -> EntityT:
        """Replace the stored fields of ``entity``.

        Raises:
            EntityNotFoundError: no row has the entity's id, or the row does not
                satisfy the extra ``criteria``.
        """

    @abstractmethod
    def delete(self, entity_id: str, *criteria: Criterion) -> EntityT | None:
        """Delete the entity and return it, or None if nothing matched."""

    @abstractmethod
    def delete_where(self, *criteria: Criterion) -> int:
        """Delete every entity matching ``criteria`` and return the count."""


class SqlModelRepository(Repository[EntityT], Generic[EntityT, TableT]):
    """SQLModel implementation of the persistence port."""

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def entity_name(self) -> str:
        return self.entity_type.__name__

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _to_values(self, entity: EntityT) -> dict[str, Any]:
        """Column values for ``entity``, limited to the table's columns."""
        # Read attributes directly: fields hidden from serialization
        # (e.g. an option's product_id) must still be persisted.
        columns = self.table_type.__table__.columns.keys()  # type: ignore[attr-defined]
        return {
            name: getattr(entity, name)
            for name in type(entity).model_fields
            if name in columns
        }

    def _select(self, *criteria: Criterion):
        statement = select(self.table_type)
        if criteria:
            statement = statement.where(*criteria)
        return statement

    def get(self, entity_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find(self, *criteria: Criterion) -> list[EntityT]:
        rows: Sequence[TableT] = self._session.exec(self._select(*criteria)).all()
        return [self._to_entity(row) for row in rows]

    def first(self, *criteria: Criterion) -> EntityT | None:
        row = self._session.exec(self._select(*criteria)).first()
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, *criteria: Criterion) -> bool:
        return self.first(*criteria) is not None

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_type(**self._to_values(entity))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity: EntityT, *criteria: Criterion) -> EntityT:
        values = self._to_values(entity)
        values.pop("id", None)
        values["updated_at"] = datetime.now(UTC)

        # Single conditional statement: the existence check and the write
        # cannot be interleaved with another request's delete.
        statement = (
            update(self.table_type)
            .where(self.table_type.id == entity.id, *criteria)  # type: ignore[arg-type]
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(statement)
        if result.rowcount == 0:
            raise EntityNotFoundError(self.entity_name, entity.id)

        # Loaded rows are stale now; reload them on next access
        self._session.expire_all()
        return entity

    def delete(self, entity_id: str, *criteria: Criterion) -> EntityT | None:
        row = self._session.exec(
            self._select(self.table_type.id == entity_id, *criteria)  # type: ignore[arg-type]
        ).first()
        if row is None:
            return None

        deleted = self._to_entity(row)
        self._session.delete(row)
        self._session.flush()
        return deleted

    def delete_where(self, *criteria: Criterion) -> int:
        statement = delete(self.table_type).execution_options(
            synchronize_session=False
        )
        if criteria:
            statement = statement.where(*criteria)
        result = self._session.execute(statement)
        self._session.expire_all()
        return result.rowcount
