# Standard library imports
import logging
from typing import Annotated, List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

# Local application imports
from ...application.dto.user_dto import (
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
    ErrorResponse,
    ValidationErrorResponse,
)
from ...application.exceptions import UserNotFoundError
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.base_container import BaseContainer
from ...domain.constants import OBJECT_ID_PATTERN
from .dependencies import get_container

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"
NOT_FOUND_MESSAGE = "User not found"

router = APIRouter(tags=["users"])

_ERROR_RESPONSES = {
    422: {"model": ValidationErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
_ID_ERROR_RESPONSES = {
    **_ERROR_RESPONSES,
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _server_error(action: str, exception: Exception) -> HTTPException:
    logger.error(f"Store failure while {action}: {exception}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=SERVER_ERROR_MESSAGE
    )


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_user(
    request: UserCreateRequest,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: Full user record
        
    Returns:
        UserResponse with the created user and its assigned ID
    """
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        return await create_user_use_case.execute(request)
    except RuntimeError as exception:
        raise _server_error("creating user", exception)


@router.get("", response_model=List[UserResponse], response_model_exclude_none=True)
async def list_users(
    container: BaseContainer = Depends(get_container),
) -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects
    """
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses=_ID_ERROR_RESPONSES,
)
async def get_user(
    user_id: str = Path(pattern=OBJECT_ID_PATTERN),
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse with user information
    """
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        return await get_user_use_case.execute(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except RuntimeError as exception:
        raise _server_error(f"fetching user {user_id}", exception)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses=_ID_ERROR_RESPONSES,
)
async def update_user(
    user_id: Annotated[str, Path(pattern=OBJECT_ID_PATTERN)],
    request: UserUpdateRequest,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Update the supplied fields of a user
    
    Args:
        user_id: ID of the user
        request: Partial user record; absent fields keep their values
        
    Returns:
        UserResponse with the updated user
    """
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        return await update_user_use_case.execute(user_id, request)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except RuntimeError as exception:
        raise _server_error(f"updating user {user_id}", exception)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ID_ERROR_RESPONSES,
)
async def delete_user(
    user_id: str = Path(pattern=OBJECT_ID_PATTERN),
    container: BaseContainer = Depends(get_container),
) -> Response:
    """
    Delete a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        Empty 204 response
    """
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        await delete_user_use_case.execute(user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    except RuntimeError as exception:
        raise _server_error(f"deleting user {user_id}", exception)
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
