import uuid
from datetime import UTC, datetime
from typing import Annotated

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel

# Required text: at least one non-whitespace character
NonBlankStr = Annotated[str, StringConstraints(min_length=1, pattern=r"^\s*\S")]


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier.

    Entities are exchanged with API clients in camelCase; Python code uses the
    snake_case field names. Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str = PydanticField(
        default_factory=new_id,
        description="Unique identifier for the entity",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with UUID primary key and bookkeeping timestamps."""

    id: str = Field(
        primary_key=True,
        default_factory=new_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
