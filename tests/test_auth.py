"""Tests for bearer-token identity."""

import pytest

from job_vault.auth import decode_token, issue_token, parse_bearer
from job_vault.errors import ErrorKind, ServiceError

SECRET = "unit-secret"


def test_round_trip_identifies_user():
    token = issue_token("user-9", SECRET, email="nine@example.com")
    user = decode_token(token, SECRET, "authenticated")
    assert user.id == "user-9"
    assert user.email == "nine@example.com"


@pytest.mark.parametrize(
    "token_args,secret,audience",
    [
        (("user-9", "other-secret"), SECRET, "authenticated"),
        (("user-9", SECRET, "anon"), SECRET, "authenticated"),
    ],
)
def test_rejects_bad_signature_and_audience(token_args, secret, audience):
    with pytest.raises(ServiceError) as exc_info:
        decode_token(issue_token(*token_args), secret, audience)
    assert exc_info.value.kind is ErrorKind.UNAUTHENTICATED


def test_rejects_expired_token():
    token = issue_token("user-9", SECRET, ttl_seconds=-60)
    with pytest.raises(ServiceError):
        decode_token(token, SECRET, "authenticated")


def test_parse_bearer():
    assert parse_bearer("Bearer abc.def") == "abc.def"
    for header in (None, "", "Basic abc", "Bearer "):
        with pytest.raises(ServiceError) as exc_info:
            parse_bearer(header)
        assert exc_info.value.status_code == 401
