"""Circle ORM: one row per circle.

Invariants:
    - owner_id points at a row in members with the same circle_id
    - owner_id is 0 only inside the create transaction, before the owner row exists

Design Decisions:
    - No ORM relationship to members: the repository issues explicit
      statements and circle_mapper assembles the aggregate
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from circles.db.base import Base


class CircleRecord(Base):
    __tablename__ = "circles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False)
