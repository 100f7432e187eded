"""
Users API endpoints

CRUD over /users. Request bodies are validated by UserDto before the
handler runs; domain errors are rendered by utils.error_handlers.
"""
from fastapi import APIRouter, Depends, Path, Response
from typing import Annotated, List
import logging

from constants import HTTPStatus, UserConstraints
from dependencies import get_user_service
from dtos.request.user_request import UserDto
from dtos.response.user_response import ErrorResponse, UserResponse
from dtos.user_mapper import to_entity, to_response, to_response_list
from services.interfaces import IUserService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {HTTPStatus.NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {HTTPStatus.BAD_REQUEST: {"model": ErrorResponse}}

UserId = Annotated[int, Path(ge=UserConstraints.ID_MIN, le=UserConstraints.ID_MAX)]


@router.get("/users", response_model=List[UserResponse], responses=_NOT_FOUND)
@log_operation("list_users")
def get_users(service: IUserService = Depends(get_user_service)):
    """List every user."""
    users = to_response_list(service.find_all())
    logger.info(f"Returning {len(users)} user(s)")
    return users


@router.get("/users/{user_id}", response_model=UserResponse, responses={**_NOT_FOUND, **_BAD_REQUEST})
@log_operation("get_user")
def get_user(user_id: UserId, service: IUserService = Depends(get_user_service)):
    """Get a single user by id."""
    return to_response(service.find_one(user_id))


@router.post("/users", responses=_BAD_REQUEST)
@log_operation("create_user")
def create_user(user_dto: UserDto, service: IUserService = Depends(get_user_service)):
    """
    Create a user.

    Responds 200 with an empty body; 400 if validation fails or the
    email is already taken.
    """
    logger.info(f"Create request for email {user_dto.email}")
    service.save(to_entity(user_dto))
    return Response(status_code=HTTPStatus.OK)


@router.put("/users/{user_id}", response_model=UserResponse, responses={**_NOT_FOUND, **_BAD_REQUEST})
@log_operation("update_user")
def update_user(user_id: UserId, user_dto: UserDto, service: IUserService = Depends(get_user_service)):
    """Replace name, email and age of an existing user and return the result."""
    return to_response(service.update(user_id, to_entity(user_dto)))


@router.delete("/users/{user_id}", responses=_NOT_FOUND)
@log_operation("delete_user")
def delete_user(user_id: UserId, service: IUserService = Depends(get_user_service)):
    """Delete a user. Responds 200 with an empty body."""
    service.delete(user_id)
    return Response(status_code=HTTPStatus.OK)
