"""Circle Schemas: request and response bodies for the /circle endpoints.

Invariants:
    - Field names and order match the public JSON contract
      (circle_id, circle_name, capacity, owner, members)
    - Strings are stripped; domain bounds (grade, capacity, age) are left to the
      domain so every rule violation produces the same ValidationError envelope
    - Integers are capped at MAX_STORED_INT so no value overflows its column
"""

from pydantic import BaseModel, ConfigDict, Field

from circles.core.domain_types import MAX_STORED_INT


class _Body(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class CreateCircleRequest(_Body):
    circle_name: str
    capacity: int = Field(le=MAX_STORED_INT)
    owner_name: str
    owner_age: int = Field(le=MAX_STORED_INT)
    owner_grade: int = Field(le=MAX_STORED_INT)
    owner_major: str


class CreateCircleResponse(BaseModel):
    circle_id: int
    owner_id: int


class MemberResponse(BaseModel):
    id: int
    name: str
    age: int
    grade: int
    major: str


class FetchCircleResponse(BaseModel):
    circle_id: int
    circle_name: str
    capacity: int
    owner: MemberResponse
    members: list[MemberResponse] = Field(default_factory=list)


class UpdateCircleRequest(_Body):
    """Partial update - omitted fields keep their current value."""
    circle_name: str | None = None
    capacity: int | None = Field(None, le=MAX_STORED_INT)


class CircleIdResponse(BaseModel):
    id: int


class AddMemberRequest(_Body):
    name: str
    age: int = Field(le=MAX_STORED_INT)
    grade: int = Field(le=MAX_STORED_INT)
    major: str


class AddMemberResponse(BaseModel):
    circle_id: int
    member_id: int
