"""Member ORM: one row per circle participant, owner included."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from circles.db.base import Base


class MemberRecord(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=20)
    grade: Mapped[int] = mapped_column(Integer, nullable=False)
    major: Mapped[str] = mapped_column(String(255), nullable=False, default="Other")
    circle_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("circles.id", ondelete="CASCADE"),
        nullable=True, index=True,
    )
