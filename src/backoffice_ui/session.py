"""
Session context shared by every backend call.

The session holds the bearer token issued by the auth endpoints. It is
passed explicitly to the HTTP client instead of being looked up from
global storage, and it changes only through login() and logout().
When given a PersistentStore the token survives a restart, like the
browser's local storage did.
"""

import base64
import binascii
import json
from typing import Any

from backoffice_ui.lib import logs
from backoffice_ui.lib.caches import PersistentStore

LOG = logs.logger(__file__)

_TOKEN_KEY = "token"


def decode_token(token: str | None) -> dict[str, Any] | None:
    """
    Decode the payload segment of a JWT without verifying it.

    Args:
        token: Encoded ``header.payload.signature`` string.

    Returns:
        The payload claims, or None if the token is malformed.
    """
    if not token:
        return None
    try:
        segment = token.split(".")[1]
        padded = segment + "=" * (-len(segment) % 4)
        claims = json.loads(base64.urlsafe_b64decode(padded).decode("utf-8"))
    except (IndexError, ValueError, binascii.Error, UnicodeDecodeError):
        LOG.warning("Could not decode token payload")
        return None
    return claims if isinstance(claims, dict) else None


class Session:
    """
    Login state of the dashboard user.

    Attributes:
        store: Optional persistent storage for the token.
    """

    def __init__(self, store: PersistentStore | None = None, token: str | None = None) -> None:
        self.store = store
        self._token = token or (store.get(_TOKEN_KEY) if store else None)

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    @property
    def user_email(self) -> str | None:
        """Email claim of the current token, used as the display name."""
        claims = decode_token(self._token)
        return claims.get("email") if claims else None

    def login(self, token: str) -> None:
        """Start a session with a freshly issued token."""
        if not token:
            raise ValueError("Cannot log in with an empty token")
        self._token = token
        if self.store:
            self.store.set(_TOKEN_KEY, token)
        LOG.info("Session started - user:%s", self.user_email)

    def logout(self) -> None:
        """End the session and forget the persisted token."""
        LOG.info("Session ended - user:%s", self.user_email)
        self._token = None
        if self.store:
            self.store.delete(_TOKEN_KEY)

    def close(self) -> None:
        """Release the persistent store; later logins are kept in memory only."""
        if self.store:
            self.store.close()
            self.store = None

    def authorization_header(self) -> dict[str, str]:
        """Return the bearer header, or nothing when logged out."""
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
