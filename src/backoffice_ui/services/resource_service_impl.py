"""
REST implementation of ResourceService using httpx.

Every resource follows the same contract:

    GET    {path}          -> list of records (or {list_path} summaries)
    GET    {path}/{id}     -> one record
    POST   {path}          -> created record
    PUT    {path}/{id}     -> updated record
    DELETE {path}/{id}     -> no body required

Requests carry the fixed API key and, when logged in, the bearer token (see
lib.clients). Responses are validated against the resource's entity schema
before they reach the controller.
"""

from typing import Any, Mapping, Sequence

import httpx

from backoffice_ui.errors import RecordValidationError, ResponseError, TransportError
from backoffice_ui.lib import logs
from backoffice_ui.models.records import api_name, deserialize_record, serialize_draft
from backoffice_ui.resources import ResourceSpec
from backoffice_ui.services.resource_service import ResourceService

LOG = logs.logger(__file__)


def json_or_none(response: httpx.Response) -> Any:
    """Decode a JSON body; empty or non-JSON bodies yield None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class HttpResourceService(ResourceService):
    """
    Backend access for one resource over HTTP.

    Attributes:
        resource: ResourceSpec of the served resource.
        client: httpx client bound to the API base URL and session.
    """

    def __init__(self, resource: ResourceSpec, client: httpx.Client) -> None:
        super().__init__(resource)
        self.client = client

    def list_records(self) -> Sequence[Any]:
        """Fetch the whole collection (or summary list) in server order."""
        path = self.resource.list_path or self.resource.path
        data = self._request("GET", path)
        if not isinstance(data, list):
            raise RecordValidationError(f"GET {path} did not return a list")
        row_type = self.resource.row_type
        records = [deserialize_record(row_type, item) for item in data]
        LOG.info("list_records - resource:%s count:%d", self.resource.name, len(records))
        return records

    def get_record(self, record_id: str) -> Any:
        data = self._request("GET", self.resource.item_path(record_id))
        return deserialize_record(self.resource.record_type, data)

    def create_record(self, draft: Mapping[str, Any]) -> Any:
        payload = serialize_draft(self.resource.record_type, draft)
        data = self._request("POST", self.resource.path, json=payload)
        return deserialize_record(self.resource.record_type, data)

    def update_record(self, record_id: str, draft: Mapping[str, Any]) -> Any:
        """Send the full record, identifier included, to ``{path}/{id}``."""
        record_type = self.resource.record_type
        payload = serialize_draft(record_type, draft)
        payload.setdefault(api_name(record_type, self.resource.id_field), record_id)
        data = self._request("PUT", self.resource.item_path(record_id), json=payload)
        return deserialize_record(record_type, data)

    def delete_record(self, record_id: str) -> None:
        self._request("DELETE", self.resource.item_path(record_id))

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        """
        Issue a request and decode the response.

        Raises:
            TransportError: If no response was received.
            ResponseError: If the status is not 2xx.
        """
        LOG.info("%s %s", method, path)
        try:
            response = self.client.request(method, path, json=json)
        except httpx.RequestError as exc:
            LOG.error("%s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        payload = json_or_none(response)
        if response.is_error:
            LOG.warning("%s %s returned %s", method, path, response.status_code)
            raise ResponseError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )
        return payload
