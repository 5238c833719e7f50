"""
Authentication calls against the back office API.

Handles the login flows, registration and password recovery. Token
issuance and validation stay on the backend; this service only moves the
issued token into the Session.
"""

from typing import Any

import httpx

from backoffice_ui.errors import ApiError, ResponseError, TransportError
from backoffice_ui.lib import logs
from backoffice_ui.services.resource_service_impl import json_or_none
from backoffice_ui.session import Session

LOG = logs.logger(__file__)


class AuthService:
    """
    Client for the ``/auth`` endpoints.

    Attributes:
        client: httpx client bound to the API base URL.
        session: Session updated by successful logins.
    """

    def __init__(self, client: httpx.Client, session: Session) -> None:
        self.client = client
        self.session = session

    def login(self, email: str, password: str) -> dict[str, Any]:
        """
        Log in with email and password.

        Returns:
            Login response with ``accessToken``, ``expiresIn`` and ``exp``.

        Raises:
            ApiError: If the backend rejects the credentials or is unreachable.
        """
        data = self._post(
            "/auth/login",
            {"email": email, "password": password},
            "Error al iniciar sesión.",
        )
        self._start_session(data)
        return data

    def login_admin(self, api_key: str) -> dict[str, Any]:
        """Log in as administrator with the shared admin key."""
        data = self._post(
            "/auth/login-admin",
            {"apiKey": api_key},
            "Error al iniciar sesión como administrador.",
        )
        self._start_session(data)
        return data

    def register(self, email: str, password: str, phone_number: str) -> dict[str, Any] | None:
        """Create a user account."""
        return self._post(
            "/auth/create",
            {"email": email, "password": password, "phoneNumber": phone_number},
            "Error al crear el usuario. Intenta nuevamente.",
        )

    def forgot_password(self, email: str) -> dict[str, Any] | None:
        """Ask the backend to send a password recovery email."""
        return self._post(
            "/auth/forgot-password",
            {"email": email},
            "Hubo un error. Intenta nuevamente.",
        )

    def logout(self) -> None:
        self.session.logout()

    def _start_session(self, data: Any) -> None:
        token = data.get("accessToken") if isinstance(data, dict) else None
        if not token:
            raise ApiError("La respuesta de inicio de sesión no incluye un token.", payload=data)
        self.session.login(token)

    def _post(self, path: str, body: dict[str, Any], fallback: str) -> Any:
        try:
            response = self.client.post(path, json=body)
        except httpx.RequestError as exc:
            LOG.error("POST %s failed: %s", path, exc)
            raise TransportError(fallback) from exc
        payload = json_or_none(response)
        if response.is_error:
            LOG.warning("POST %s returned %s", path, response.status_code)
            raise ResponseError(fallback, status_code=response.status_code, payload=payload)
        return payload
