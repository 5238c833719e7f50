"""
Tests for ListSyncController: loading, filtering, paging, writes and banners.
"""
from unittest.mock import Mock

import pytest

from conftest import FACTURA_DRAFT, make_factura
from backoffice_ui.controller import BANNER_SECONDS
from backoffice_ui.errors import ResponseError, TransportError
from backoffice_ui.models.common import DialogMode, FilterCriteria
from backoffice_ui.models.records import Proveedor, ProveedorListItem
from backoffice_ui.resources import get_resource
from backoffice_ui.services.resource_service_demo import DemoResourceService


def _ids(records):
    return [r.id for r in records]


# =============================================================================
# Loading and filtering
# =============================================================================


class TestLoad:
    def test_load_without_filters_keeps_everything(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 6)])
        assert ctrl.load()
        assert len(ctrl.records) == 5
        assert ctrl.window.page == 1
        assert ctrl.loading is False

    def test_month_filter_scenario(self, make_controller):
        ctrl = make_controller(
            records=[
                make_factura(1, fecha="2024-03-15T10:00:00Z"),
                make_factura(2, fecha="2024-04-01T00:00:00Z"),
            ]
        )
        ctrl.load(FilterCriteria("month", "2024-03"))
        assert _ids(ctrl.records) == ["1"]

    def test_year_and_search_are_combined(self, make_controller):
        ctrl = make_controller(
            records=[
                make_factura(1, fecha="2024-03-15T10:00:00Z", rif=301234567),
                make_factura(2, fecha="2024-05-15T10:00:00Z", rif=409876543),
                make_factura(3, fecha="2023-05-15T10:00:00Z", rif=301234567),
            ]
        )
        ctrl.load(FilterCriteria("year", "2024", "3012"))
        assert _ids(ctrl.records) == ["1"]

    def test_zero_matches_is_empty_state(self, make_controller):
        ctrl = make_controller(records=[make_factura(1)])
        assert ctrl.load(FilterCriteria("year", "1999"))
        window = ctrl.window
        assert window.is_empty
        assert window.total_pages == 1
        assert window.page == 1
        assert ctrl.error_message is None

    def test_reload_reapplies_current_criteria(self, make_controller):
        ctrl = make_controller(records=[make_factura(1), make_factura(2, fecha="2023-01-10T10:00:00Z")])
        ctrl.load(FilterCriteria("year", "2024"))
        ctrl.load()
        assert _ids(ctrl.records) == ["1"]

    def test_case_insensitive_search_for_utilities(self, make_controller):
        ctrl = make_controller("servicios_basicos")
        ctrl.load(FilterCriteria(search="of-"))
        assert len(ctrl.records) == 2

    def test_failed_load_keeps_previous_state(self, make_controller):
        service = DemoResourceService(get_resource("facturas"), [make_factura(i) for i in range(1, 16)])
        ctrl = make_controller(service=service)
        ctrl.load()
        ctrl.set_page(2)

        service.list_records = Mock(side_effect=TransportError("connection refused"))
        assert ctrl.load() is False
        assert len(ctrl.records) == 15
        assert ctrl.page == 2
        assert ctrl.error_message == "Error al cargar las facturas."
        assert ctrl.loading is False

    def test_failed_load_prefers_backend_message(self, make_controller):
        service = DemoResourceService(get_resource("facturas"), [])
        service.list_records = Mock(
            side_effect=ResponseError("boom", status_code=500, payload={"message": "Base de datos caída"})
        )
        ctrl = make_controller(service=service)
        ctrl.load()
        assert ctrl.error_message == "Base de datos caída"


# =============================================================================
# Pagination
# =============================================================================


class TestPaging:
    def test_twenty_five_records_scenario(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 26)])
        ctrl.load()
        assert ctrl.total_pages == 3

        assert ctrl.set_page(3)
        assert _ids(ctrl.window.items) == [str(i) for i in range(21, 26)]

        assert ctrl.set_page(4) is False
        assert ctrl.page == 3
        assert len(ctrl.window.items) == 5

    def test_out_of_range_pages_are_ignored(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 12)])
        ctrl.load()
        ctrl.set_page(2)
        before = ctrl.window.items
        assert ctrl.set_page(0) is False
        assert ctrl.set_page(-1) is False
        assert ctrl.page == 2
        assert ctrl.window.items == before

    def test_set_page_does_not_refetch(self, make_controller):
        service = DemoResourceService(get_resource("facturas"), [make_factura(i) for i in range(1, 12)])
        service.list_records = Mock(wraps=service.list_records)
        ctrl = make_controller(service=service)
        ctrl.load()
        ctrl.set_page(2)
        assert service.list_records.call_count == 1

    def test_load_keeps_current_page_when_valid(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 26)])
        ctrl.load()
        ctrl.set_page(2)
        ctrl.load()
        assert ctrl.page == 2

    def test_narrower_filter_clamps_page(self, make_controller):
        records = [make_factura(i) for i in range(1, 26)] + [make_factura(99, fecha="2023-06-01T10:00:00Z")]
        ctrl = make_controller(records=records)
        ctrl.load()
        ctrl.set_page(3)
        ctrl.load(FilterCriteria("year", "2023"))
        assert ctrl.page == 1
        assert _ids(ctrl.window.items) == ["99"]


# =============================================================================
# Writes
# =============================================================================


class TestCreate:
    def test_create_appends_server_record(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 4)])
        ctrl.load()
        before = len(ctrl.records)

        record = ctrl.create(FACTURA_DRAFT)

        assert record is not None
        assert len(ctrl.records) == before + 1
        assert _ids(ctrl.records).count(record.id) == 1
        assert ctrl.records[-1] is record
        assert ctrl.success_message == "Factura agregada con éxito"

    def test_create_keeps_current_page(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 21)])
        ctrl.load()
        ctrl.set_page(2)
        ctrl.create(FACTURA_DRAFT)
        assert ctrl.page == 2
        assert ctrl.total_pages == 3

    def test_create_failure_leaves_collection_and_dialog(self, make_controller):
        ctrl = make_controller(records=[make_factura(1)])
        ctrl.load()
        ctrl.open_add_dialog()

        assert ctrl.create({"nombre": "SIN DATOS"}) is None

        assert len(ctrl.records) == 1
        assert ctrl.dialog.mode is DialogMode.ADD
        assert ctrl.error_message.startswith("Error al agregar la factura. Intenta nuevamente.")
        assert "Campos requeridos" in ctrl.error_message

    def test_create_closes_dialog_on_success(self, make_controller):
        ctrl = make_controller(records=[])
        ctrl.load()
        ctrl.open_add_dialog()
        ctrl.submit_dialog(FACTURA_DRAFT)
        assert not ctrl.dialog.is_open
        assert len(ctrl.records) == 1


class TestUpdate:
    def test_update_replaces_matching_record(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 4)])
        ctrl.load()
        ctrl.open_edit_dialog("2")
        assert ctrl.dialog.draft["nombre"] == "PROVEEDOR 2"

        updated = ctrl.submit_dialog({"nombre": "RENOMBRADO"})

        assert updated.nombre == "RENOMBRADO"
        assert _ids(ctrl.records) == ["1", "2", "3"]
        assert ctrl.records[1].nombre == "RENOMBRADO"
        assert not ctrl.dialog.is_open
        assert ctrl.success_message == "Factura editada con éxito"

    def test_update_failure_does_not_mutate(self, make_controller):
        ctrl = make_controller(records=[make_factura(1)])
        ctrl.load()
        assert ctrl.update("42", FACTURA_DRAFT) is None
        assert ctrl.records[0].nombre == "PROVEEDOR 1"
        assert ctrl.error_message == "Registro no encontrado"


class TestRemove:
    def test_remove_drops_record(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 4)])
        ctrl.load()

        assert ctrl.remove("2")

        assert "2" not in _ids(ctrl.records)
        assert len(ctrl.records) == 2
        assert ctrl.success_message == "Factura eliminada con éxito"

    def test_remove_missing_id_still_sends_delete(self, make_controller):
        service = DemoResourceService(get_resource("facturas"), [make_factura(1)])
        service.delete_record = Mock(wraps=service.delete_record)
        ctrl = make_controller(service=service)
        ctrl.load()

        assert ctrl.remove("404") is False

        service.delete_record.assert_called_once_with("404")
        assert _ids(ctrl.records) == ["1"]
        assert ctrl.error_message == "Registro no encontrado"

    def test_declined_confirmation_sends_nothing(self, make_controller):
        service = DemoResourceService(get_resource("facturas"), [make_factura(1)])
        service.delete_record = Mock(wraps=service.delete_record)
        prompts = []

        def decline(prompt):
            prompts.append(prompt)
            return False

        ctrl = make_controller(service=service, confirm=decline)
        ctrl.load()

        assert ctrl.remove("1") is False
        service.delete_record.assert_not_called()
        assert prompts == ["¿Estás seguro de que deseas eliminar esta factura?"]
        assert len(ctrl.records) == 1

    def test_confirm_override(self, make_controller):
        ctrl = make_controller(records=[make_factura(1)], confirm=None)
        ctrl.load()
        with pytest.raises(ValueError):
            ctrl.remove("1")
        assert ctrl.remove("1", confirm=lambda prompt: True)

    def test_deleting_last_row_of_last_page_clamps(self, make_controller):
        ctrl = make_controller(records=[make_factura(i) for i in range(1, 12)])
        ctrl.load()
        ctrl.set_page(2)

        ctrl.remove("11")

        assert ctrl.total_pages == 1
        assert ctrl.page == 1
        assert len(ctrl.window.items) == 10


# =============================================================================
# Banners
# =============================================================================


class TestBanners:
    def test_success_banner_expires(self, make_controller, clock):
        ctrl = make_controller(records=[make_factura(1)])
        ctrl.load()
        ctrl.remove("1")
        assert ctrl.success_message is not None

        clock.advance(BANNER_SECONDS - 0.5)
        assert ctrl.success_message is not None
        clock.advance(0.5)
        assert ctrl.success_message is None

    def test_banners_are_independent(self, make_controller, clock):
        ctrl = make_controller(records=[make_factura(1)])
        ctrl.load()
        ctrl.remove("1")
        clock.advance(2)
        ctrl.remove("missing")
        clock.advance(1.5)
        assert ctrl.success_message is None
        assert ctrl.error_message == "Registro no encontrado"


# =============================================================================
# Summary-list resources
# =============================================================================


class TestProveedores:
    def test_rows_are_summaries(self, make_controller):
        ctrl = make_controller("proveedores")
        ctrl.load(FilterCriteria("month", "2024-03", "3012"))
        assert len(ctrl.records) == 1
        assert isinstance(ctrl.records[0], ProveedorListItem)

    def test_edit_prefetches_full_record(self, make_controller):
        service = DemoResourceService(get_resource("proveedores"))
        service.get_record = Mock(wraps=service.get_record)
        ctrl = make_controller("proveedores", service=service)
        ctrl.load()

        assert ctrl.open_edit_dialog("301234567")

        service.get_record.assert_called_once_with("301234567")
        assert ctrl.dialog.draft["razon_social"] == "FERRETERIA EL TORNILLO"

    def test_update_patches_summary_row(self, make_controller):
        ctrl = make_controller("proveedores")
        ctrl.load()
        ctrl.open_edit_dialog("409876543")

        ctrl.submit_dialog({"razon_social": "ASEO TOTAL"})

        row = next(r for r in ctrl.records if r.rif == "409876543")
        assert isinstance(row, ProveedorListItem)
        assert row.descripcion == "J-409876543, ASEO TOTAL"

    def test_create_duplicate_rif_fails(self, make_controller):
        ctrl = make_controller("proveedores")
        ctrl.load()
        draft = {
            "rif": "301234567",
            "tipo_rif": "J",
            "razon_social": "OTRA",
            "fecha_vencimiento_rif": "2025-01-01T00:00:00.000Z",
        }
        assert ctrl.create(draft) is None
        assert ctrl.error_message == "El registro ya existe"
        assert len(ctrl.records) == 2

    def test_show_details_returns_full_record(self, make_controller):
        ctrl = make_controller("proveedores")
        ctrl.load()
        assert isinstance(ctrl.show_details("301234567"), Proveedor)

    def test_show_details_failure(self, make_controller):
        ctrl = make_controller("proveedores")
        ctrl.load()
        assert ctrl.show_details("1") is None
        assert ctrl.error_message == "Registro no encontrado"
