"""
Demo implementation of ResourceService using in-memory records.

This service is useful for:
- Running the dashboard without a backend
- Exercising the list controller in tests
- Demonstrations with realistic condominium data

Writes go through the same schema conversion as the HTTP service, so
drafts that the backend would reject are rejected here as well.
"""

from dataclasses import fields
from typing import Any, Mapping, Sequence

from backoffice_ui.data.demo_records import DEMO_RECORDS
from backoffice_ui.errors import ResponseError
from backoffice_ui.lib import logs
from backoffice_ui.models.records import (
    api_name,
    deserialize_record,
    serialize_draft,
    serialize_record,
)
from backoffice_ui.resources import ResourceSpec
from backoffice_ui.services.resource_service import ResourceService

LOG = logs.logger(__file__)


class DemoResourceService(ResourceService):
    """
    In-memory resource backed by demo fixtures.

    Attributes:
        resource: ResourceSpec of the served resource.
    """

    def __init__(self, resource: ResourceSpec, records: Sequence[Any] | None = None) -> None:
        super().__init__(resource)
        seed = DEMO_RECORDS.get(resource.name, ()) if records is None else records
        self._records: list[Any] = list(seed)
        self._next_id = 1 + max(
            (int(r.id) for r in self._records if str(getattr(r, "id", "")).isdigit()),
            default=0,
        )

    def list_records(self) -> Sequence[Any]:
        """Return all records, or their summaries for summary-list resources."""
        return [self.resource.to_row(record) for record in self._records]

    def get_record(self, record_id: str) -> Any:
        return self._records[self._index(record_id)]

    def create_record(self, draft: Mapping[str, Any]) -> Any:
        """Store the draft, assigning an identifier when the server owns it."""
        record_type = self.resource.record_type
        payload = serialize_draft(record_type, draft)
        if self._server_assigns_id():
            payload[api_name(record_type, "id")] = str(self._next_id)
            self._next_id += 1
        record = deserialize_record(record_type, payload)
        if any(self.resource.record_id(r) == self.resource.record_id(record) for r in self._records):
            raise ResponseError(
                "Duplicate identifier",
                status_code=409,
                payload={"message": "El registro ya existe"},
            )
        self._records.append(record)
        LOG.info("create_record - resource:%s id:%s", self.resource.name, self.resource.record_id(record))
        return record

    def update_record(self, record_id: str, draft: Mapping[str, Any]) -> Any:
        index = self._index(record_id)
        record_type = self.resource.record_type
        payload = {**serialize_record(self._records[index]), **serialize_draft(record_type, draft)}
        record = deserialize_record(record_type, payload)
        self._records[index] = record
        return record

    def delete_record(self, record_id: str) -> None:
        del self._records[self._index(record_id)]
        LOG.info("delete_record - resource:%s id:%s", self.resource.name, record_id)

    def _server_assigns_id(self) -> bool:
        return any(
            f.name == self.resource.id_field and f.metadata.get("server")
            for f in fields(self.resource.record_type)
        )

    def _index(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if self.resource.record_id(record) == str(record_id):
                return index
        raise ResponseError(
            f"{self.resource.path}/{record_id} not found",
            status_code=404,
            payload={"message": "Registro no encontrado"},
        )
