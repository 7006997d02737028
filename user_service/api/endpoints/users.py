"""User API: thin routes delegating to UserService.

UserNotFoundException propagates to the registered exception handler (404).
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from user_service.api.dependencies import get_user_service, get_user_service_for_write
from user_service.application.dtos.user import USER_SCALAR_FIELDS, UserPatch
from user_service.application.services.user_service import UserService
from user_service.schemas.user import UserCollectionResponse, UserSchema

router = APIRouter()

ReadService = Annotated[UserService, Depends(get_user_service)]
WriteService = Annotated[UserService, Depends(get_user_service_for_write)]


@router.get("", response_model=UserCollectionResponse)
async def find_all(service: ReadService) -> UserCollectionResponse:
    """List users that have credentials."""
    dtos = await service.find_all()
    return UserCollectionResponse(dtos=[UserSchema.from_dto(d) for d in dtos])


@router.get("/username/{username}", response_model=UserSchema)
async def find_by_username(username: str, service: ReadService) -> UserSchema:
    """Get the user linked to a credential username."""
    return UserSchema.from_dto(await service.find_by_username(username))


@router.get("/{user_id}", response_model=UserSchema)
async def find_by_id(user_id: int, service: ReadService) -> UserSchema:
    """Get user by id."""
    return UserSchema.from_dto(await service.find_by_id(user_id))


@router.post("", response_model=UserSchema)
async def save(body: UserSchema, service: WriteService) -> UserSchema:
    """Create a user. A supplied userId or credential is ignored."""
    return UserSchema.from_dto(await service.save(body.to_dto()))


@router.put("", response_model=UserSchema)
async def update(body: UserSchema, service: WriteService) -> UserSchema:
    """Replace the scalar fields of the user identified by body.userId."""
    return UserSchema.from_dto(await service.update(body.to_dto()))


@router.put("/{user_id}", response_model=UserSchema)
async def update_by_id(
    user_id: int, body: UserSchema, service: WriteService
) -> UserSchema:
    """Overlay the fields sent in the body onto user user_id."""
    patch = UserPatch.from_mapping(
        body.model_dump(exclude_unset=True, include=set(USER_SCALAR_FIELDS))
    )
    return UserSchema.from_dto(await service.update_by_id(user_id, patch))


@router.delete("/{user_id}", response_model=bool)
async def delete_by_id(user_id: int, service: WriteService) -> bool:
    """Delete the user's credential (the user row is kept). Returns true."""
    await service.delete_by_id(user_id)
    return True
