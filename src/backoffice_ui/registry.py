"""
Per-browser-client sessions and list controllers.

The Reflex state is serializable and cannot hold a Session or a
ListSyncController, so the dashboard keeps them here, keyed by the browser's
client token. Entries are released on logout and, beyond ``max_clients``,
the least recently used client is released as well; its token stays in the
persistent store, so the next request from that browser restores it.
"""

from collections import OrderedDict
from typing import Callable

from backoffice_ui.controller import ListSyncController
from backoffice_ui.lib import logs
from backoffice_ui.lib.caches import PersistentStore
from backoffice_ui.resources import get_resource
from backoffice_ui.services import get_resource_service, release_session
from backoffice_ui.session import Session

LOG = logs.logger(__file__)

MAX_CLIENTS = 256


class ClientRegistry:
    """
    Owns the Session and controllers of every connected browser client.

    Attributes:
        service_kind: Service implementation used for new controllers.
        max_clients: Number of clients kept before the oldest is released.
    """

    def __init__(
        self,
        service_kind: str,
        max_clients: int = MAX_CLIENTS,
        session_factory: Callable[[str], Session] | None = None,
    ) -> None:
        self.service_kind = service_kind
        self.max_clients = max_clients
        self._session_factory = session_factory or (
            lambda client_token: Session(PersistentStore(namespace=client_token))
        )
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._controllers: dict[tuple[str, str], ListSyncController] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, client_token: str) -> bool:
        return client_token in self._sessions

    def session(self, client_token: str) -> Session:
        """Return the session of a client, restoring a persisted token."""
        if client_token in self._sessions:
            self._sessions.move_to_end(client_token)
            return self._sessions[client_token]
        session = self._session_factory(client_token)
        self._sessions[client_token] = session
        while len(self._sessions) > self.max_clients:
            oldest = next(iter(self._sessions))
            LOG.info("Evicting idle client %s", oldest)
            self.release(oldest)
        return session

    def controller(self, client_token: str, resource: str) -> ListSyncController:
        """Return the controller of a client for one resource."""
        session = self.session(client_token)
        key = (client_token, resource)
        if key not in self._controllers:
            spec = get_resource(resource)
            service = get_resource_service(spec.name, self.service_kind, session)
            self._controllers[key] = ListSyncController(spec, service)
        return self._controllers[key]

    def release(self, client_token: str) -> None:
        """Drop a client's controllers, close its HTTP client and its store."""
        for key in [k for k in self._controllers if k[0] == client_token]:
            del self._controllers[key]
        session = self._sessions.pop(client_token, None)
        if session is None:
            return
        release_session(session)
        session.close()
