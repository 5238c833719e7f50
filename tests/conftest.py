"""
Shared fixtures for the back office tests.

Controllers run against the in-memory demo service with a fake clock and a
UTC calendar, so filters and banners behave the same on every machine.
"""
from datetime import timezone

import pytest

from backoffice_ui.controller import ListSyncController
from backoffice_ui.models.records import Factura
from backoffice_ui.resources import get_resource
from backoffice_ui.services.resource_service_demo import DemoResourceService


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_factura(index: int, fecha: str = "2024-03-15T14:00:00.000Z", rif: int = 301234567) -> Factura:
    """Build a valid invoice with a predictable identifier."""
    return Factura(
        id=str(index),
        tipo_rif="J",
        rif_proveedor=rif,
        nombre=f"PROVEEDOR {index}",
        no_factura=1000 + index,
        fecha=fecha,
        base=100.0,
        iva=16.0,
        total=116.0,
    )


FACTURA_DRAFT = {
    "tipo_rif": "J",
    "rif_proveedor": 301234567,
    "nombre": "NUEVO PROVEEDOR",
    "no_factura": 555,
    "fecha": "2024-03-20T14:00:00.000Z",
    "base": 10.0,
    "iva": 1.6,
    "total": 11.6,
}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_controller(clock):
    """Factory building a controller over demo records for a resource."""

    def _make(resource="facturas", records=None, confirm=lambda prompt: True, service=None):
        spec = get_resource(resource)
        service = service or DemoResourceService(spec, records)
        return ListSyncController(
            spec,
            service,
            confirm=confirm,
            clock=clock,
            tz=timezone.utc,
        )

    return _make
