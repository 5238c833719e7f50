"""
Abstract base class defining the data access contract for one resource.

The list controller talks to the backend only through this interface, so
the same screen logic runs against the REST API or the in-memory demo.

Implementations:
- HttpResourceService: httpx calls against the back office REST API
- DemoResourceService: In-memory records for development and tests
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from backoffice_ui.resources import ResourceSpec


class ResourceService(ABC):
    """
    Abstract base class for one REST resource.

    Attributes:
        resource: ResourceSpec of the served resource.
    """

    def __init__(self, resource: ResourceSpec) -> None:
        self.resource = resource

    @abstractmethod
    def list_records(self) -> Sequence[Any]:
        """
        Return the full collection in server order.

        Resources with a summary list return summary rows instead of full
        records.
        """

    @abstractmethod
    def get_record(self, record_id: str) -> Any:
        """Return one full record."""

    @abstractmethod
    def create_record(self, draft: Mapping[str, Any]) -> Any:
        """
        Persist a draft and return the authoritative record.

        Args:
            draft: Field values keyed by attribute name, without identifier.
        """

    @abstractmethod
    def update_record(self, record_id: str, draft: Mapping[str, Any]) -> Any:
        """Replace a record and return the stored version."""

    @abstractmethod
    def delete_record(self, record_id: str) -> None:
        """Delete a record. Succeeds silently or raises ApiError."""
