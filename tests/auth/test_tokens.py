from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from flask import Flask

from campus_system.auth.tokens import JWTAuthenticator, Principal
from campus_system.core.exceptions import AuthenticationError


@pytest.fixture
def authenticator():
    return JWTAuthenticator("unit-test-secret", ttl_minutes=10)


def _request(headers=None):
    app = Flask(__name__)
    return app.test_request_context("/api/student", headers=headers or {})


def test_issue_then_authenticate(authenticator):
    token = authenticator.issue("registrar", role="admin")

    with _request({"Authorization": f"Bearer {token}"}) as ctx:
        principal = authenticator.authenticate(ctx.request)

    assert principal == Principal(subject="registrar", role="admin")


@pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "bearer token"])
def test_missing_or_malformed_header(authenticator, header):
    headers = {"Authorization": header} if header is not None else {}

    with _request(headers) as ctx, pytest.raises(AuthenticationError, match="missing"):
        authenticator.authenticate(ctx.request)


def test_expired_token(authenticator):
    token = authenticator.issue("registrar", now=datetime.now(timezone.utc) - timedelta(minutes=11))

    with pytest.raises(AuthenticationError, match="expired"):
        authenticator.decode(token)


def test_token_signed_with_another_key(authenticator):
    token = JWTAuthenticator("other-secret").issue("registrar")

    with pytest.raises(AuthenticationError, match="Invalid"):
        authenticator.decode(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        JWTAuthenticator("")
