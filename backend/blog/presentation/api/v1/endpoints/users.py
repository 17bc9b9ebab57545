"""Account endpoints for the authenticated user."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from blog.application.schemas import ChangePasswordRequest, OperationResult, ProfileUpdate, UserResponse
from blog.application.services import UserService
from blog.domain.exceptions import EntityNotFoundError, NoOpError, ValidationError
from blog.infrastructure.dependencies import get_user_service, require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


@router.get("/user", response_model=UserResponse)
async def get_current_user(
    user_id: int = Depends(require_user_id),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return UserResponse.model_validate(user)


@router.post("/user/profile", response_model=OperationResult)
async def update_profile(
    data: ProfileUpdate,
    user_id: int = Depends(require_user_id),
    service: UserService = Depends(get_user_service),
) -> OperationResult:
    try:
        user = await service.update_profile(user_id, data.model_dump(exclude_unset=True))
    except (EntityNotFoundError, NoOpError, ValidationError) as e:
        logger.warning("Profile update for user %s failed: %s", user_id, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok(UserResponse.model_validate(user))


@router.post("/auth/repassword", response_model=OperationResult)
async def change_password(
    data: ChangePasswordRequest,
    user_id: int = Depends(require_user_id),
    service: UserService = Depends(get_user_service),
) -> OperationResult:
    try:
        await service.change_password(user_id, data.curr_password, data.new_password)
    except (EntityNotFoundError, ValidationError) as e:
        logger.warning("Password change for user %s failed: %s", user_id, e)
        return OperationResult.fail(str(e))
    return OperationResult.ok()
