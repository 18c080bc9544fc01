import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from user_management.domain.user import User
from user_management.services.config import settings
from user_management.services.user_service import UserService, UsersPage
from user_management.services.utils.validation import validate_user_fields

logging.basicConfig(stream=sys.stdout, level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_ERROR = "A user with this email already exists."
INVALID_ID_ERROR = "User ID must be greater than 0."


class Outcome(str, Enum):
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    INVALID = "invalid"
    REJECTED = "rejected"
    NOT_FOUND = "not_found"


@dataclass
class HandlerResult:
    outcome: Outcome
    user: Optional[User] = None
    page: Optional[UsersPage] = None
    message: Optional[str] = None
    errors: List[str] = field(default_factory=list)


def _not_found(user_id: int) -> HandlerResult:
    return HandlerResult(outcome=Outcome.NOT_FOUND, message=f"User with ID {user_id} not found.")


def _invalid_id() -> HandlerResult:
    return HandlerResult(outcome=Outcome.INVALID, message=INVALID_ID_ERROR)


def _collect_errors(
    name: Optional[str],
    age: Optional[int],
    email: Optional[str],
    service: UserService,
    exclude_id: Optional[int] = None,
) -> List[str]:
    errors = validate_user_fields(name, age, email)
    if isinstance(email, str) and service.email_exists(email, exclude_id=exclude_id):
        errors.append(DUPLICATE_EMAIL_ERROR)
    return errors


def list_users(
    page: int,
    page_size: int,
    service: UserService,
    max_page_size: int = settings.USER_MANAGEMENT_MAX_PAGE_SIZE,
) -> HandlerResult:
    logger.info("start list_users")
    logger.info(f"{page=}, {page_size=}")
    if page <= 0 or page_size <= 0 or page_size > max_page_size:
        logger.info("finish list_users: invalid paging")
        return HandlerResult(
            outcome=Outcome.INVALID,
            message=f"Page must be > 0 and pageSize must be between 1 and {max_page_size}.",
        )
    result = service.get_all_users(page, page_size)
    logger.info(f"finish list_users, returned={len(result.users)}")
    return HandlerResult(outcome=Outcome.OK, page=result)


def fetch_user(user_id: int, service: UserService) -> HandlerResult:
    logger.info("start fetch_user")
    logger.info(f"{user_id=}")
    if user_id <= 0:
        return _invalid_id()
    user = service.get_user_by_id(user_id)
    logger.info("finish fetch_user")
    if user is None:
        return _not_found(user_id)
    return HandlerResult(outcome=Outcome.OK, user=user)


def create_user(
    name: Optional[str],
    age: Optional[int],
    email: Optional[str],
    service: UserService,
) -> HandlerResult:
    logger.info("start create_user")
    logger.info(f"{email=}")
    with service.atomic():
        errors = _collect_errors(name, age, email, service)
        if errors:
            logger.info(f"finish create_user, {errors=}")
            return HandlerResult(outcome=Outcome.REJECTED, errors=errors)
        user = service.create_user(name=name, age=age, email=email)
    logger.info(f"finish create_user, user_id={user.id}")
    return HandlerResult(outcome=Outcome.CREATED, user=user)


def update_user(
    user_id: int,
    name: Optional[str],
    age: Optional[int],
    email: Optional[str],
    service: UserService,
) -> HandlerResult:
    logger.info("start update_user")
    logger.info(f"{user_id=}, {email=}")
    if user_id <= 0:
        return _invalid_id()
    with service.atomic():
        if service.get_user_by_id(user_id) is None:
            logger.info("finish update_user: not found")
            return _not_found(user_id)
        errors = _collect_errors(name, age, email, service, exclude_id=user_id)
        if errors:
            logger.info(f"finish update_user, {errors=}")
            return HandlerResult(outcome=Outcome.REJECTED, errors=errors)
        user = service.update_user(user_id, name=name, age=age, email=email)
    logger.info("finish update_user")
    return HandlerResult(outcome=Outcome.OK, user=user)


def delete_user(user_id: int, service: UserService) -> HandlerResult:
    logger.info("start delete_user")
    logger.info(f"{user_id=}")
    if user_id <= 0:
        return _invalid_id()
    deleted = service.delete_user(user_id)
    logger.info(f"finish delete_user, {deleted=}")
    if not deleted:
        return _not_found(user_id)
    return HandlerResult(outcome=Outcome.NO_CONTENT)
