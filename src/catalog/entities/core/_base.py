from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identity."""

    id: int | None = PydanticField(
        default=None,
        description="Identity assigned by the store on first save",
    )

    created_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


class EntityTable(SQLModel, table=False):
    """Base table with an auto-incremented integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identity assigned by the database",
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
