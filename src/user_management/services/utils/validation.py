from __future__ import annotations

from typing import List, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AGE_MIN = 1
AGE_MAX = 150

NAME_ERROR = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
AGE_ERROR = f"Age must be between {AGE_MIN} and {AGE_MAX}."
EMAIL_ERROR = "Please provide a valid email address."

# intranet and loopback mailboxes are accepted; arpa, invalid and onion stay rejected
PRIVATE_DOMAIN_NAMES = ("local", "localhost", "test")
for _name in PRIVATE_DOMAIN_NAMES:
    if _name in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_name)


def is_valid_name(name: Optional[str]) -> bool:
    if not isinstance(name, str) or not name.strip():
        return False
    return NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def is_valid_age(age: Optional[int]) -> bool:
    if not isinstance(age, int) or isinstance(age, bool):
        return False
    return AGE_MIN <= age <= AGE_MAX


def is_valid_email(email: Optional[str]) -> bool:
    if not isinstance(email, str) or not email.strip():
        return False
    # padded input is not the address it parses to
    if email != email.strip():
        return False
    try:
        validate_email(
            email,
            check_deliverability=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return True


def validate_user_fields(name: Optional[str], age: Optional[int], email: Optional[str]) -> List[str]:
    errors: List[str] = []
    if not is_valid_name(name):
        errors.append(NAME_ERROR)
    if not is_valid_age(age):
        errors.append(AGE_ERROR)
    if not is_valid_email(email):
        errors.append(EMAIL_ERROR)
    return errors
