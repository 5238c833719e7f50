"""
Error types raised by the service layer and caught by the list controller.

Three kinds of failure reach the user:

- transport failures (the backend could not be reached),
- non-2xx responses, optionally carrying a ``message`` in the JSON body,
- drafts missing required fields.

The controller turns all of them into a transient banner via describe_error().
"""

from typing import Any, Iterable

from benedict import benedict


class BackofficeError(Exception):
    """Base class for every error raised by this package."""


class ApiError(BackofficeError):
    """
    A backend call failed.

    Attributes:
        message: Human readable description, preferably from the backend.
        status_code: HTTP status, or None when no response was received.
        payload: Decoded response body when it was JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def backend_message(self) -> str | None:
        """Return the ``message`` field supplied by the backend, if any."""
        if not isinstance(self.payload, dict):
            return None
        message = benedict(self.payload).get("message")
        if isinstance(message, list):
            message = ", ".join(str(m) for m in message)
        return str(message) if message else None


class TransportError(ApiError):
    """The request never produced a response (DNS, refused, timeout)."""


class ResponseError(ApiError):
    """The backend answered with a non-2xx status."""


class RecordValidationError(BackofficeError, ValueError):
    """
    A record or draft did not match its entity schema.

    Attributes:
        fields: Names of the offending fields.
    """

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.fields = tuple(fields)


def describe_error(exc: BaseException, fallback: str) -> str:
    """
    Map an exception to the text shown in the error banner.

    The backend's own message wins; validation errors describe the missing
    fields; everything else uses the caller's Spanish fallback text.
    """
    if isinstance(exc, ApiError) and exc.backend_message:
        return exc.backend_message
    if isinstance(exc, RecordValidationError) and exc.fields:
        return f"{fallback} Campos requeridos: {', '.join(exc.fields)}."
    return fallback
