"""ORM Models: SQLAlchemy declarative tables for circles and members.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models are storage rows only; domain rules live in core/

Design Decisions:
    - All models imported here so Base.metadata is complete before
      create_all() or an Alembic autogenerate runs
"""

from circles.models.circle import CircleRecord  # noqa: F401
from circles.models.member import MemberRecord  # noqa: F401
