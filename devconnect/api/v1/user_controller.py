# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, Query

# Local application imports
from ...application.dto.user_dto import ProfileUpdateRequest, UserResponse
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    search: Optional[str] = Query(default=None, max_length=100),
    current_user: UserResponse = Depends(get_current_user),
) -> List[UserResponse]:
    """
    List developers, newest first
    
    Args:
        search: Optional case-insensitive match on name, email or skills
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute(search=search)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """Edit the current user's name, bio, skills and avatar"""
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)
    return await update_profile_use_case.execute(
        acting_user_id=current_user.id,
        request=request,
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """Get a user's public profile"""
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    return await get_user_use_case.execute(user_id)
