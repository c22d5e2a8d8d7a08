"""Base repositories with common data access operations."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from src.fieldops.models.base import EntityBase, utc_now

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """ILIKE pattern matching ``text`` as a plain substring; use with ``escape=LIKE_ESCAPE``."""
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return f"%{text}%"


class BaseRepository[ModelType: EntityBase]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer. Soft-deleted rows are never returned.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a live record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == id,
                self.model.is_deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    def touch(self, entity: ModelType) -> None:
        """Stamp ``updated_at`` and stage the entity for the next flush."""
        entity.updated_at = utc_now()
        self.session.add(entity)

    def soft_delete(self, entity: ModelType) -> None:
        """Flag the entity deleted (no flush/commit)."""
        entity.is_deleted = True
        self.touch(entity)


class TenantScopedRepository[ModelType: EntityBase](BaseRepository[ModelType]):
    """Repository for models that carry a ``tenant_id`` column.

    The tenant predicate is part of every lookup query, so a row from another
    tenant is indistinguishable from one that does not exist.
    """

    async def get_in_tenant(self, tenant_id: UUID, id: UUID) -> ModelType | None:
        result = await self.session.execute(
            select(self.model).where(
                self.model.id == id,
                self.model.tenant_id == tenant_id,  # type: ignore[attr-defined]
                self.model.is_deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()
