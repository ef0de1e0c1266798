from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

import jwt
from flask import Request

from ..core.constants import BEARER_PREFIX, DEFAULT_TOKEN_TTL_MINUTES, TOKEN_ALGORITHM
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class Principal:
    subject: str
    role: Optional[str] = None


class Authenticator(Protocol):
    """Pass/fail gate in front of the resource routes."""

    def authenticate(self, request: Request) -> Principal:
        """Return the caller or raise AuthenticationError."""

        raise NotImplementedError


def _bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        raise AuthenticationError("Authentication token is missing")

    token = header[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Authentication token is missing")
    return token


class JWTAuthenticator:
    """HS256 bearer tokens signed with the application's SECRET_KEY."""

    def __init__(self, secret_key: str, *, ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = timedelta(minutes=int(ttl_minutes))

    def issue(self, subject: str, *, role: Optional[str] = None, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {"sub": str(subject), "iat": issued_at, "exp": issued_at + self._ttl}
        if role:
            claims["role"] = role
        return jwt.encode(claims, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: str) -> Principal:
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid authentication token") from exc

        subject = claims.get("sub")
        if not subject:
            raise AuthenticationError("Invalid authentication token")
        return Principal(subject=str(subject), role=claims.get("role"))

    def authenticate(self, request: Request) -> Principal:
        return self.decode(_bearer_token(request))
