"""
FastAPI router for the users bounded context.

All routes delegate to the user service. No business logic here.
Input shapes are validated by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Request, Response

from app.application.users.dtos import ListUsersQuery
from app.application.users.user_service import UserService
from app.core.config import settings
from app.interfaces.users.dependencies import get_user_service
from app.interfaces.users.schemas import UserRequest, UserResponse
from app.shared.errors.schemas import ExceptionResponse

HTTP_201 = 201
HTTP_204 = 204

router = APIRouter(prefix="/users", tags=["users"])

BAD_REQUEST = {400: {"model": ExceptionResponse}}
NOT_FOUND = {404: {"model": ExceptionResponse}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=HTTP_201,
    responses=BAD_REQUEST,
    summary="Create a user",
)
def create_user(
    body: UserRequest,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user and point the Location header at it."""
    user = service.create(body.to_command())
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return UserResponse.from_entity(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Get a user",
)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.from_entity(service.get_by_id(user_id))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a user",
    description="Overwrites every field; fields missing from the body become null.",
)
def update_user(
    user_id: int,
    body: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.from_entity(service.update(user_id, body.to_command()))


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Partially update a user",
    description="Overwrites only the fields present and non-null in the body.",
)
def partial_update_user(
    user_id: int,
    body: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.from_entity(
        service.partial_update(user_id, body.to_command())
    )


@router.delete(
    "/{user_id}",
    status_code=HTTP_204,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    service.delete_by_id(user_id)
    return Response(status_code=HTTP_204)


@router.get(
    "",
    response_model=list[UserResponse],
    responses=BAD_REQUEST,
    summary="List users",
    description=(
        "Returns one page of users ordered by id. When both `from` and `to` "
        "are given, only users born in that inclusive range are returned."
    ),
)
def list_users(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(
        settings.default_page_size, ge=1, le=settings.max_page_size
    ),
    date_from: date | None = Query(None, alias="from", description="YYYY-MM-DD"),
    date_to: date | None = Query(None, alias="to", description="YYYY-MM-DD"),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List users one page at a time."""
    query = ListUsersQuery(
        offset=page * size,
        limit=size,
        date_from=date_from,
        date_to=date_to,
    )
    return [UserResponse.from_entity(user) for user in service.list_users(query)]
