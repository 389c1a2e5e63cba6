"""Circle Repository: persists Circle aggregates as one circle row plus member rows.

Invariants:
    - Every public method is one transaction: commit on success, rollback on any error
    - Statements are parameterized SQLAlchemy Core constructs (no string SQL)
    - SQLAlchemy exceptions leave this module only as StoreError
    - Member rows are always written owner first
    - An id outside the INTEGER column range is not found, never sent to the store

Design Decisions:
    - update() is delete-and-replace of the member set, not a diff. Assigned
      member ids are re-inserted as-is so owner_id and member identity survive
    - create() inserts the circle with owner_id=0, then re-points it at the
      generated owner row id; the transaction hides the intermediate state
    - Core table statements over ORM unit-of-work: no identity-map staleness
      between the delete and re-insert of the same member ids
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from circles.core.circle import Circle
from circles.core.domain_types import (
    CircleId, UNASSIGNED_ID, fits_column, is_assigned,
)
from circles.core.errors import NotFoundError, StoreError
from circles.infrastructure.circle_mapper import (
    CircleRow, MemberRow, from_storage, to_storage,
)
from circles.models.circle import CircleRecord
from circles.models.member import MemberRecord

logger = logging.getLogger(__name__)

_circles = CircleRecord.__table__
_members = MemberRecord.__table__


class SqlCircleRepository:
    """CircleRepository over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, circle_id: CircleId) -> Circle:
        logger.info("find_by_id", extra={"circle_id": circle_id, "operation": "find"})
        if not fits_column(circle_id):
            raise NotFoundError(circle_id)
        async with self._transaction("find", circle_id):
            circle = await self._load(circle_id)
        return circle

    async def create(self, circle: Circle) -> Circle:
        circle_row, member_rows = to_storage(circle)
        async with self._transaction("create"):
            result = await self.db.execute(
                insert(_circles).values(
                    name=circle_row.name,
                    capacity=circle_row.capacity,
                    owner_id=UNASSIGNED_ID,
                ),
            )
            circle_id = result.inserted_primary_key[0]
            owner_id = await self._insert_members(
                member_rows, circle_id, keep_ids=False,
            )
            await self._point_owner(circle_id, owner_id)
            created = await self._load(circle_id)
        logger.info(
            f"Circle created with owner {owner_id}",
            extra={"circle_id": circle_id, "operation": "create"},
        )
        return created

    async def update(self, circle: Circle) -> Circle:
        circle_row, member_rows = to_storage(circle)
        if not fits_column(circle_row.id):
            raise NotFoundError(circle_row.id)
        async with self._transaction("update", circle_row.id):
            result = await self.db.execute(
                update(_circles)
                .where(_circles.c.id == circle_row.id)
                .values(name=circle_row.name, capacity=circle_row.capacity),
            )
            if result.rowcount == 0:
                raise NotFoundError(circle_row.id)
            await self.db.execute(
                delete(_members).where(_members.c.circle_id == circle_row.id),
            )
            owner_id = await self._insert_members(
                member_rows, circle_row.id, keep_ids=True,
            )
            await self._point_owner(circle_row.id, owner_id)
            updated = await self._load(CircleId(circle_row.id))
        logger.info(
            "Circle updated", extra={"circle_id": circle_row.id, "operation": "update"},
        )
        return updated

    async def delete(self, circle: Circle) -> None:
        circle_id = int(circle.id)
        if not fits_column(circle_id):
            raise NotFoundError(circle_id)
        async with self._transaction("delete", circle_id):
            # Members first: circle_id must never reference a missing circle
            await self.db.execute(
                delete(_members).where(_members.c.circle_id == circle_id),
            )
            result = await self.db.execute(
                delete(_circles).where(_circles.c.id == circle_id),
            )
            if result.rowcount == 0:
                raise NotFoundError(circle_id)
        logger.info(
            "Circle deleted", extra={"circle_id": circle_id, "operation": "delete"},
        )

    # ─── Helpers ────────────────────────────────────────────────

    @asynccontextmanager
    async def _transaction(
        self, operation: str, circle_id: int | None = None,
    ) -> AsyncGenerator[None, None]:
        """Commit the enclosed statements as one unit, or roll all of them back."""
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Circle {operation} failed: {e}",
                extra={"circle_id": circle_id, "operation": operation},
            )
            raise StoreError(operation) from e
        except Exception:
            # Domain errors and non-driver failures still undo the statements
            await self.db.rollback()
            raise

    async def _load(self, circle_id: int) -> Circle:
        result = await self.db.execute(
            select(_circles).where(_circles.c.id == circle_id),
        )
        circle_row = result.mappings().one_or_none()
        if circle_row is None:
            raise NotFoundError(circle_id)

        result = await self.db.execute(
            select(_members)
            .where(_members.c.circle_id == circle_id)
            .order_by(_members.c.id),
        )
        member_rows = [MemberRow.from_mapping(r) for r in result.mappings()]
        return from_storage(CircleRow.from_mapping(circle_row), member_rows)

    async def _insert_members(
        self, rows: list[MemberRow], circle_id: int, keep_ids: bool,
    ) -> int:
        """Insert rows in order; returns the id given to the first (owner) row."""
        owner_id: int | None = None
        for row in rows:
            values = {
                "name": row.name,
                "age": row.age,
                "grade": row.grade,
                "major": row.major,
                "circle_id": circle_id,
            }
            if keep_ids and is_assigned(row.id):
                values["id"] = row.id
            result = await self.db.execute(insert(_members).values(**values))
            inserted_id = result.inserted_primary_key[0]
            if owner_id is None:
                owner_id = inserted_id
        return owner_id

    async def _point_owner(self, circle_id: int, owner_id: int) -> None:
        await self.db.execute(
            update(_circles)
            .where(_circles.c.id == circle_id)
            .values(owner_id=owner_id),
        )
