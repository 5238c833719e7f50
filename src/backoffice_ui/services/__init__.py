"""
Service factory for the back office dashboard.

This module provides get_resource_service(), which returns the
ResourceService implementation for a resource based on configuration.

Available Implementations:
- demo: In-memory service with static records (no backend required)
- impl: httpx-backed service talking to the REST API

Services are cached per (resource, kind, session), so every screen of one
session shares one HTTP client; release_session() closes them again when
the session ends. Configure via BACKOFFICE_SERVICE.
"""

import os
from functools import cache
from typing import Callable, Dict

import httpx

from backoffice_ui.lib import clients, logs
from backoffice_ui.lib.caches import PersistentStore
from backoffice_ui.resources import ResourceSpec, get_resource
from backoffice_ui.services.auth_service import AuthService
from backoffice_ui.services.resource_service import ResourceService
from backoffice_ui.services.resource_service_demo import DemoResourceService
from backoffice_ui.services.resource_service_impl import HttpResourceService
from backoffice_ui.session import Session

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[ResourceSpec, Session], ResourceService]] = {
    "demo": lambda spec, session: DemoResourceService(spec),
    "impl": lambda spec, session: HttpResourceService(spec, api_client_for(session)),
}

# Per-session objects, dropped again by release_session()
_CLIENTS: Dict[Session, httpx.Client] = {}
_SERVICES: Dict[tuple[str, str, Session], ResourceService] = {}


@cache
def default_session() -> Session:
    """Return the process-wide session backed by the persistent store."""
    return Session(PersistentStore())


def api_client_for(session: Session) -> httpx.Client:
    """Return the shared HTTP client of a session."""
    if session not in _CLIENTS:
        _CLIENTS[session] = clients.api_client(session)
    return _CLIENTS[session]


def get_resource_service(
    resource: str,
    kind: str | None = None,
    session: Session | None = None,
) -> ResourceService:
    """Return the configured service implementation for a resource."""
    spec = get_resource(resource)
    resolved_kind = (kind or os.getenv("BACKOFFICE_SERVICE", "impl")).lower()
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown resource service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    session = session or default_session()
    key = (spec.name, resolved_kind, session)
    if key not in _SERVICES:
        LOG.info("get_resource_service - resource:%s kind:%s", spec.name, resolved_kind)
        _SERVICES[key] = factory(spec, session)
    return _SERVICES[key]


def get_auth_service(session: Session | None = None) -> AuthService:
    """Return an AuthService bound to the session's HTTP client."""
    session = session or default_session()
    return AuthService(api_client_for(session), session)


def release_session(session: Session) -> None:
    """
    Drop the services and HTTP client of a session and close them.

    The next call for the same session builds fresh ones.
    """
    for key in [k for k in _SERVICES if k[2] is session]:
        del _SERVICES[key]
    client = _CLIENTS.pop(session, None)
    if client is not None:
        client.close()
    LOG.info("release_session - user:%s", session.user_email)


__all__ = [
    "AuthService",
    "DemoResourceService",
    "HttpResourceService",
    "ResourceService",
    "api_client_for",
    "default_session",
    "get_auth_service",
    "get_resource_service",
    "release_session",
]
