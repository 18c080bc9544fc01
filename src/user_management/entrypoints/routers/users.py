from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from user_management.entrypoints.schemas.user import (
    CreateUserRequest,
    ErrorListResponse,
    MessageResponse,
    PagedUsersResponse,
    ProtectedResponse,
    UpdateUserRequest,
    UserResponse,
)
from user_management.entrypoints.security import ApiPrincipal, require_api_key
from user_management.services.handlers import user as handlers
from user_management.services.handlers.user import HandlerResult, Outcome
from user_management.services.user_service import UserService

router = APIRouter(prefix="/users")

ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Invalid id or paging, or field errors as {errors: [...]}"},
    404: {"model": MessageResponse, "description": "User not found"},
}


def get_service(request: Request) -> UserService:
    return request.app.state.user_service


def _error_response(result: HandlerResult) -> JSONResponse:
    if result.outcome is Outcome.REJECTED:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorListResponse(errors=result.errors).model_dump(),
        )
    status_code = status.HTTP_404_NOT_FOUND if result.outcome is Outcome.NOT_FOUND else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=MessageResponse(detail=result.message or "").model_dump())


@router.get("", response_model=PagedUsersResponse, status_code=200, summary="List users page by page", responses=ERROR_RESPONSES)
def get_users(
    request: Request,
    page: int = Query(default=1),
    page_size: Optional[int] = Query(default=None, alias="pageSize"),
    service: UserService = Depends(get_service),
):
    config = request.app.state.settings
    if page_size is None:
        page_size = config.USER_MANAGEMENT_DEFAULT_PAGE_SIZE
    result = handlers.list_users(page, page_size, service, max_page_size=config.USER_MANAGEMENT_MAX_PAGE_SIZE)
    if result.outcome is not Outcome.OK:
        return _error_response(result)
    users_page = result.page
    return PagedUsersResponse(
        users=[UserResponse.model_validate(user) for user in users_page.users],
        page=users_page.page,
        page_size=users_page.page_size,
        total_users=users_page.total_users,
        total_pages=users_page.total_pages,
    )


@router.get("/protected", response_model=ProtectedResponse, status_code=200, summary="Requires a valid API key")
def get_protected_data(principal: ApiPrincipal = Depends(require_api_key)) -> ProtectedResponse:
    return ProtectedResponse(message="This is a protected endpoint!", timestamp=datetime.now(timezone.utc))


@router.get("/{user_id}", response_model=UserResponse, status_code=200, summary="Get one user", responses=ERROR_RESPONSES)
def get_user(user_id: int, service: UserService = Depends(get_service)):
    result = handlers.fetch_user(user_id, service)
    if result.outcome is not Outcome.OK:
        return _error_response(result)
    return UserResponse.model_validate(result.user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    summary="Create a user",
    responses={400: {"model": ErrorListResponse, "description": "Field errors"}},
)
def create_user(
    payload: CreateUserRequest,
    request: Request,
    response: Response,
    service: UserService = Depends(get_service),
):
    result = handlers.create_user(payload.name, payload.age, payload.email, service)
    if result.outcome is not Outcome.CREATED:
        return _error_response(result)
    response.headers["Location"] = str(request.url_for("get_user", user_id=result.user.id))
    return UserResponse.model_validate(result.user)


@router.put("/{user_id}", response_model=UserResponse, status_code=200, summary="Replace a user's fields", responses=ERROR_RESPONSES)
def update_user(user_id: int, payload: UpdateUserRequest, service: UserService = Depends(get_service)):
    result = handlers.update_user(user_id, payload.name, payload.age, payload.email, service)
    if result.outcome is not Outcome.OK:
        return _error_response(result)
    return UserResponse.model_validate(result.user)


@router.delete("/{user_id}", status_code=204, summary="Delete a user", responses=ERROR_RESPONSES)
def delete_user(user_id: int, service: UserService = Depends(get_service)):
    result = handlers.delete_user(user_id, service)
    if result.outcome is not Outcome.NO_CONTENT:
        return _error_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
