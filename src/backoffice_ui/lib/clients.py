"""
HTTP client factory for the back office REST API.

Environment variables used:
- BACKOFFICE_API_URL: Base URL including the version prefix
- BACKOFFICE_API_KEY: Value of the ``x-api-key`` header sent on every call
- BACKOFFICE_HTTP_TIMEOUT: Request timeout in seconds
"""

import os
from typing import TYPE_CHECKING, Generator

import httpx

if TYPE_CHECKING:
    from backoffice_ui.session import Session

# Must differ from the Reflex frontend (3000) and backend (8000) ports
DEFAULT_API_URL = "http://localhost:4000/api/v1"
API_URL = os.getenv("BACKOFFICE_API_URL", DEFAULT_API_URL)
API_KEY = os.getenv("BACKOFFICE_API_KEY", "")
HTTP_TIMEOUT = float(os.getenv("BACKOFFICE_HTTP_TIMEOUT", "10"))


class SessionAuth(httpx.Auth):
    """Adds the session's bearer token, read at request time."""

    def __init__(self, session: "Session") -> None:
        self.session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers.update(self.session.authorization_header())
        yield request


def api_client(
    session: "Session",
    base_url: str | None = None,
    api_key: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Build an httpx client bound to the API and the given session.

    Args:
        session: Session supplying the bearer token.
        base_url: Overrides BACKOFFICE_API_URL.
        api_key: Overrides BACKOFFICE_API_KEY.
        transport: Custom transport, e.g. httpx.MockTransport in tests.

    Returns:
        Configured httpx.Client. Callers own it and should close it.
    """
    headers = {"Content-Type": "application/json"}
    key = API_KEY if api_key is None else api_key
    if key:
        headers["x-api-key"] = key
    return httpx.Client(
        base_url=base_url or API_URL,
        headers=headers,
        auth=SessionAuth(session),
        timeout=HTTP_TIMEOUT,
        transport=transport,
    )
