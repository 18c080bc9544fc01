import dataclasses

import pytest
from fastapi import HTTPException

from user_management.entrypoints.security import ApiKeyGate, ApiPrincipal


@pytest.fixture
def gate():
    return ApiKeyGate(api_key="s3cret-Key")


def test_matching_key_yields_principal(gate):
    principal = gate.authenticate("s3cret-Key")
    assert principal == ApiPrincipal(name="API User", identifier="api-user")


@pytest.mark.parametrize(
    "provided, detail",
    [
        (None, "Missing API Key"),
        ("", "Invalid API Key"),
        ("   ", "Invalid API Key"),
        ("s3cret-key", "Invalid API Key"),
        ("s3cret-Key-extra", "Invalid API Key"),
        ("sécret", "Invalid API Key"),
    ],
)
def test_rejections(gate, provided, detail):
    with pytest.raises(HTTPException) as error:
        gate.authenticate(provided)
    assert error.value.status_code == 401
    assert error.value.detail == detail
    assert error.value.headers == {"WWW-Authenticate": "ApiKey"}


def test_gate_is_immutable(gate):
    with pytest.raises(dataclasses.FrozenInstanceError):
        gate.api_key = "other"


def test_key_not_in_repr(gate):
    assert "s3cret" not in repr(gate)
