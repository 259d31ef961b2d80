"""HTTP Basic credential checks for the protected dashboard endpoints."""

import base64
import secrets
from typing import Callable

from fastapi import Request

from config import Settings

MISSING_HEADER = "Unauthorized: Missing or invalid Authorization header"


class AuthError(Exception):
    """401 for a missing or malformed header, 403 for well-formed but wrong credentials."""

    def __init__(self, status_code: int, message: str, headers: dict[str, str] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.headers = headers


def parse_basic_auth(header: str | None) -> tuple[str, str]:
    """Decode ``Basic <base64(user:password)>``; the password may contain colons."""
    if not header or not header.startswith("Basic "):
        raise AuthError(401, MISSING_HEADER)
    try:
        decoded = base64.b64decode(header[len("Basic "):].strip(), validate=True).decode("utf-8")
    except ValueError as e:
        raise AuthError(401, MISSING_HEADER) from e
    username, _, password = decoded.partition(":")
    return username, password


def _matches(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


class BasicAuthGuard:
    """
    FastAPI dependency checking one configured username/password pair.

    An unset (empty) configured username rejects every request with 403.
    With ``realm`` set, 401 responses carry a WWW-Authenticate challenge.
    """

    def __init__(
        self,
        credentials: Callable[[Settings], tuple[str, str]],
        forbidden_message: str,
        realm: str | None = None,
    ):
        self._credentials = credentials
        self._forbidden_message = forbidden_message
        self._realm = realm

    def __call__(self, request: Request) -> str:
        try:
            # Starlette header lookup is case-insensitive
            username, password = parse_basic_auth(request.headers.get("authorization"))
        except AuthError as e:
            if self._realm:
                e.headers = {"WWW-Authenticate": f'Basic realm="{self._realm}"'}
            raise

        expected_user, expected_password = self._credentials(request.app.state.settings)
        user_ok = _matches(username, expected_user)
        password_ok = _matches(password, expected_password)
        if not expected_user or not (user_ok and password_ok):
            raise AuthError(403, self._forbidden_message)
        return username


compare_auth = BasicAuthGuard(
    lambda s: (s.compare_username, s.compare_password),
    forbidden_message="Forbidden: Invalid credentials",
)

records_auth = BasicAuthGuard(
    lambda s: (s.records_username, s.records_password),
    forbidden_message="Forbidden: Invalid username or password",
    realm="Restricted",
)
