from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class CreateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name, 2-100 characters")
    age: Optional[StrictInt] = Field(default=None, description="Age in years, 1-150")
    email: Optional[str] = Field(default=None, description="Unique email address")


class UpdateUserRequest(CreateUserRequest):
    pass


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    email: str


class PagedUsersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    users: List[UserResponse] = Field(default_factory=list)
    page: int
    page_size: int = Field(alias="pageSize")
    total_users: int = Field(alias="totalUsers")
    total_pages: int = Field(alias="totalPages")


class ErrorListResponse(BaseModel):
    errors: List[str]


class MessageResponse(BaseModel):
    detail: str


class ProtectedResponse(BaseModel):
    message: str
    timestamp: datetime
