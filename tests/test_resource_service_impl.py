"""
Tests for the httpx-backed resource service, run against httpx.MockTransport.
"""
import json
from datetime import timezone
from urllib.parse import urlparse

import httpx
import pytest

from backoffice_ui.controller import ListSyncController
from backoffice_ui.errors import RecordValidationError, ResponseError, TransportError
from backoffice_ui.lib import clients
from backoffice_ui.lib.clients import api_client
from backoffice_ui.models.records import ProveedorListItem
from backoffice_ui.resources import get_resource
from backoffice_ui.services.resource_service_impl import HttpResourceService, json_or_none
from backoffice_ui.session import Session

BASE_URL = "http://backend.test/api/v1"

FACTURA = {
    "id": "1",
    "tipoRif": "J",
    "rifProveedor": 301234567,
    "nombre": "FERRETERIA",
    "noFactura": 12,
    "fecha": "2024-03-15T14:00:00.000Z",
    "base": 100,
    "iva": 16,
    "total": 116,
}


class Backend:
    """Records requests and answers with canned responses."""

    def __init__(self, responder):
        self.requests = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


def _service(resource, responder, token="header.payload.sig"):
    backend = Backend(responder)
    session = Session(token=token)
    client = api_client(session, base_url=BASE_URL, api_key="secret", transport=httpx.MockTransport(backend))
    return HttpResourceService(get_resource(resource), client), backend


# =============================================================================
# Requests
# =============================================================================


class TestRequests:
    def test_list_sends_api_key_and_bearer(self):
        service, backend = _service("facturas", lambda r: httpx.Response(200, json=[FACTURA]))

        records = service.list_records()

        request = backend.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/facturas"
        assert request.headers["x-api-key"] == "secret"
        assert request.headers["Authorization"] == "Bearer header.payload.sig"
        assert records[0].rif_proveedor == 301234567

    def test_no_bearer_when_logged_out(self):
        service, backend = _service("facturas", lambda r: httpx.Response(200, json=[]), token=None)
        service.list_records()
        assert "Authorization" not in backend.requests[0].headers

    def test_token_is_read_per_request(self):
        service, backend = _service("facturas", lambda r: httpx.Response(200, json=[]), token=None)
        session = service.client.auth.session
        session.login("new.token.value")
        service.list_records()
        assert backend.requests[0].headers["Authorization"] == "Bearer new.token.value"

    def test_summary_list_endpoint(self):
        service, backend = _service(
            "proveedores",
            lambda r: httpx.Response(200, json=[{"rif": "301234567", "descripcion": "J-301234567, FERRETERIA"}]),
        )
        rows = service.list_records()
        assert backend.requests[0].url.path == "/api/v1/Proveedor/listAll"
        assert rows == [ProveedorListItem(rif="301234567", descripcion="J-301234567, FERRETERIA")]

    def test_create_posts_draft_without_identifier(self):
        service, backend = _service("facturas", lambda r: httpx.Response(201, json=FACTURA))
        draft = {
            "tipo_rif": "J",
            "rif_proveedor": 301234567,
            "nombre": "FERRETERIA",
            "no_factura": 12,
            "fecha": "2024-03-15T14:00:00.000Z",
            "base": 100,
            "iva": 16,
            "total": 116,
        }

        record = service.create_record(draft)

        request = backend.requests[0]
        body = json.loads(request.content)
        assert request.method == "POST"
        assert "id" not in body
        assert body["rifProveedor"] == 301234567
        assert record.id == "1"

    def test_update_puts_full_record(self):
        service, backend = _service("facturas", lambda r: httpx.Response(200, json=FACTURA))
        draft = {
            "tipo_rif": "J",
            "rif_proveedor": 301234567,
            "nombre": "FERRETERIA",
            "no_factura": 12,
            "fecha": "2024-03-15T14:00:00.000Z",
            "base": 100,
            "iva": 16,
            "total": 116,
        }
        service.update_record("1", draft)

        request = backend.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/api/v1/facturas/1"
        assert json.loads(request.content)["id"] == "1"

    def test_delete_accepts_empty_body(self):
        service, backend = _service("facturas", lambda r: httpx.Response(204))
        assert service.delete_record("3") is None
        assert backend.requests[0].method == "DELETE"
        assert backend.requests[0].url.path == "/api/v1/facturas/3"

    def test_get_record(self):
        service, backend = _service("facturas", lambda r: httpx.Response(200, json=FACTURA))
        assert service.get_record("1").nombre == "FERRETERIA"
        assert backend.requests[0].url.path == "/api/v1/facturas/1"

    def test_null_optional_column_does_not_break_load(self):
        rows = [
            FACTURA,
            {**FACTURA, "id": "2", "retencionIva": None},
            {**FACTURA, "id": "3", "retiene1xMil": None},
        ]
        service, _ = _service("facturas", lambda r: httpx.Response(200, json=rows))
        ctrl = ListSyncController(get_resource("facturas"), service, tz=timezone.utc)

        assert ctrl.load()

        assert [r.id for r in ctrl.records] == ["1", "2", "3"]
        assert ctrl.records[1].retencion_iva == 0.0
        assert ctrl.error_message is None


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    def test_not_found_carries_backend_message(self):
        service, _ = _service("facturas", lambda r: httpx.Response(404, json={"message": "Factura no existe"}))
        with pytest.raises(ResponseError) as info:
            service.delete_record("99")
        assert info.value.status_code == 404
        assert info.value.backend_message == "Factura no existe"

    def test_error_without_json_body(self):
        service, _ = _service("facturas", lambda r: httpx.Response(500, text="Internal Server Error"))
        with pytest.raises(ResponseError) as info:
            service.list_records()
        assert info.value.payload is None
        assert info.value.backend_message is None

    def test_transport_failure(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        service, _ = _service("facturas", refuse)
        with pytest.raises(TransportError) as info:
            service.list_records()
        assert info.value.status_code is None

    def test_non_list_collection_is_rejected(self):
        service, _ = _service("facturas", lambda r: httpx.Response(200, json={"data": []}))
        with pytest.raises(RecordValidationError):
            service.list_records()

    def test_malformed_record_is_rejected(self):
        service, _ = _service("facturas", lambda r: httpx.Response(200, json=[{"id": "1"}]))
        with pytest.raises(RecordValidationError):
            service.list_records()


class TestJsonOrNone:
    def test_empty_body(self):
        assert json_or_none(httpx.Response(204)) is None

    def test_text_body(self):
        assert json_or_none(httpx.Response(200, text="ok")) is None

    def test_json_body(self):
        assert json_or_none(httpx.Response(200, json={"a": 1})) == {"a": 1}


# =============================================================================
# Client defaults
# =============================================================================


class TestClientDefaults:
    def test_default_api_url_does_not_collide_with_reflex_ports(self):
        port = urlparse(clients.DEFAULT_API_URL).port
        assert port not in (3000, 8000)

    def test_default_api_url_keeps_version_prefix(self):
        assert urlparse(clients.DEFAULT_API_URL).path == "/api/v1"
