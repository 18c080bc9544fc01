from concurrent.futures import ThreadPoolExecutor

import pytest

from user_management.services.handlers import user as handlers
from user_management.services.handlers.user import DUPLICATE_EMAIL_ERROR, INVALID_ID_ERROR, Outcome
from user_management.services.user_service import UserService
from user_management.services.utils.validation import AGE_ERROR, EMAIL_ERROR, NAME_ERROR


@pytest.fixture
def service():
    return UserService()


@pytest.mark.parametrize("page, page_size", [(0, 10), (-1, 10), (1, 0), (1, 101)])
def test_list_users_rejects_bad_paging(service, page, page_size):
    result = handlers.list_users(page, page_size, service)
    assert result.outcome is Outcome.INVALID
    assert result.message == "Page must be > 0 and pageSize must be between 1 and 100."


def test_list_users_returns_page(service):
    result = handlers.list_users(1, 100, service)
    assert result.outcome is Outcome.OK
    assert len(result.page.users) == 3


def test_fetch_user_outcomes(service):
    assert handlers.fetch_user(0, service).message == INVALID_ID_ERROR
    missing = handlers.fetch_user(9, service)
    assert missing.outcome is Outcome.NOT_FOUND
    assert missing.message == "User with ID 9 not found."
    assert handlers.fetch_user(1, service).user.name == "John Doe"


def test_create_user_collects_all_errors(service):
    result = handlers.create_user("J", 200, "JOHN.DOE@EXAMPLE.COM", service)
    assert result.outcome is Outcome.REJECTED
    assert result.errors == [NAME_ERROR, AGE_ERROR, DUPLICATE_EMAIL_ERROR]
    assert service.count() == 3


def test_create_user_with_missing_fields(service):
    result = handlers.create_user(None, None, None, service)
    assert result.errors == [NAME_ERROR, AGE_ERROR, EMAIL_ERROR]


def test_create_user_success(service):
    result = handlers.create_user(" Eve ", 22, "Eve@Example.com", service)
    assert result.outcome is Outcome.CREATED
    assert result.user.id == 4
    assert result.user.email == "eve@example.com"


def test_update_user_keeps_own_email(service):
    result = handlers.update_user(1, "John Q. Doe", 31, "john.doe@example.com", service)
    assert result.outcome is Outcome.OK
    assert result.user.name == "John Q. Doe"


def test_update_user_rejects_taken_email(service):
    result = handlers.update_user(1, "John Doe", 30, "Jane.Smith@example.com", service)
    assert result.outcome is Outcome.REJECTED
    assert result.errors == [DUPLICATE_EMAIL_ERROR]
    assert service.get_user_by_id(1).email == "john.doe@example.com"


def test_update_user_checks_existence_before_fields(service):
    result = handlers.update_user(77, "", 0, "", service)
    assert result.outcome is Outcome.NOT_FOUND


def test_update_user_invalid_id(service):
    result = handlers.update_user(-3, "John Doe", 30, "john.doe@example.com", service)
    assert result.outcome is Outcome.INVALID


def test_delete_user_outcomes(service):
    assert handlers.delete_user(0, service).outcome is Outcome.INVALID
    assert handlers.delete_user(2, service).outcome is Outcome.NO_CONTENT
    assert handlers.delete_user(2, service).outcome is Outcome.NOT_FOUND


def test_parallel_creates_with_same_email_admit_one(service):
    def create(n):
        return handlers.create_user(f"Racer {n}", 30, "race@example.com", service).outcome

    with ThreadPoolExecutor(max_workers=10) as pool:
        outcomes = list(pool.map(create, range(20)))

    assert outcomes.count(Outcome.CREATED) == 1
    assert outcomes.count(Outcome.REJECTED) == 19
    assert service.count() == 4
