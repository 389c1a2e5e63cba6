"""Circle Routes: create, fetch, update, delete circles and manage membership.

Invariants:
    - Every handler builds one use case around a request-scoped SqlCircleRepository
    - Domain and store failures propagate as CircleError to the global handler
      (404 "Circle not found", 400 validation, 500/503 infrastructure)
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from circles.infrastructure.circle_repository import SqlCircleRepository
from circles.infrastructure.database import get_db
from circles.schemas.circle import (
    AddMemberRequest, AddMemberResponse, CircleIdResponse,
    CreateCircleRequest, CreateCircleResponse, FetchCircleResponse,
    UpdateCircleRequest,
)
from circles.services.create_circle import CreateCircleInput, CreateCircleUsecase
from circles.services.delete_circle import DeleteCircleUsecase
from circles.services.fetch_circle import FetchCircleUsecase
from circles.services.manage_members import (
    AddMemberInput, AddMemberUsecase, RemoveMemberUsecase,
)
from circles.services.update_circle import UpdateCircleInput, UpdateCircleUsecase

router = APIRouter(prefix="/circle", tags=["circles"])


def get_circle_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlCircleRepository:
    return SqlCircleRepository(db)


@router.post(
    "", response_model=CreateCircleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_circle(
    body: CreateCircleRequest,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    """Create a circle together with its owner."""
    output = await CreateCircleUsecase(repository).execute(
        CreateCircleInput(**body.model_dump()),
    )
    return CreateCircleResponse(
        circle_id=output.circle_id, owner_id=output.owner_id,
    )


@router.get("/{circle_id}", response_model=FetchCircleResponse)
async def fetch_circle(
    circle_id: int,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    output = await FetchCircleUsecase(repository).execute(circle_id)
    return FetchCircleResponse.model_validate(asdict(output))


@router.put("/{circle_id}", response_model=CircleIdResponse)
async def update_circle(
    circle_id: int,
    body: UpdateCircleRequest,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    """Rename and/or resize; omitted fields are left unchanged."""
    updated_id = await UpdateCircleUsecase(repository).execute(
        UpdateCircleInput(
            id=circle_id, circle_name=body.circle_name, capacity=body.capacity,
        ),
    )
    return CircleIdResponse(id=updated_id)


@router.delete("/{circle_id}", response_model=CircleIdResponse)
async def delete_circle(
    circle_id: int,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    deleted_id = await DeleteCircleUsecase(repository).execute(circle_id)
    return CircleIdResponse(id=deleted_id)


@router.post(
    "/{circle_id}/members", response_model=AddMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    circle_id: int,
    body: AddMemberRequest,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    """Join a circle; fails when it is already at capacity."""
    output = await AddMemberUsecase(repository).execute(
        AddMemberInput(circle_id=circle_id, **body.model_dump()),
    )
    return AddMemberResponse(
        circle_id=output.circle_id, member_id=output.member_id,
    )


@router.delete(
    "/{circle_id}/members/{member_id}", response_model=CircleIdResponse,
)
async def remove_member(
    circle_id: int,
    member_id: int,
    repository: SqlCircleRepository = Depends(get_circle_repository),
):
    removed_id = await RemoveMemberUsecase(repository).execute(
        circle_id, member_id,
    )
    return CircleIdResponse(id=removed_id)
