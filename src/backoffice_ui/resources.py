"""
Catalog of the back office resources.

Each dashboard module is the same list screen parameterized by a
ResourceSpec: where the records live on the backend, which dataclass
describes them, which field carries the date used by the month/year
selector, which field the search box matches, and the Spanish messages
shown after each operation.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from backoffice_ui.models.records import (
    Condominio,
    ElecAseo,
    Factura,
    Impuesto,
    Nomina,
    Proveedor,
    ProveedorListItem,
    Seniat,
    ServicioBasico,
    ServicioTelef,
    Viatico,
)
from backoffice_ui.utils.list_helpers import stringify


@dataclass(frozen=True, slots=True)
class Messages:
    """User-facing texts for one resource."""

    load_error: str
    created: str
    create_error: str
    updated: str
    update_error: str
    deleted: str
    delete_error: str
    confirm_delete: str
    detail_error: str = "Error al cargar los detalles."


def _messages(singular: str, plural: str, feminine: bool = False) -> Messages:
    article = "la" if feminine else "el"
    this = "esta" if feminine else "este"
    suffix = "a" if feminine else "o"
    noun = singular[0].upper() + singular[1:]
    return Messages(
        load_error=f"Error al cargar {'las' if feminine else 'los'} {plural}.",
        created=f"{noun} agregad{suffix} con éxito",
        create_error=f"Error al agregar {article} {singular}. Intenta nuevamente.",
        updated=f"{noun} editad{suffix} con éxito",
        update_error=f"Error al editar {article} {singular}. Intenta nuevamente.",
        deleted=f"{noun} eliminad{suffix} con éxito",
        delete_error=f"Error al eliminar {article} {singular}. Contacta al administrador.",
        confirm_delete=f"¿Estás seguro de que deseas eliminar {this} {singular}?",
    )


@dataclass(frozen=True, slots=True)
class ResourceSpec:
    """
    Parameters of one list screen.

    Attributes:
        name: Key used in menus and the service factory.
        label: Menu title.
        path: Backend collection path, e.g. ``/facturas``.
        record_type: Entity dataclass returned by the backend.
        id_field: Attribute holding the identifier.
        search_field: Attribute matched by the search box.
        messages: Spanish banner texts.
        date_field: Attribute compared by the month/year selector; None
            disables date filtering for the resource.
        search_case_insensitive: Lower-case both sides before matching.
        list_path: Summary endpoint used instead of ``path`` for listing.
        list_type: Dataclass of the summary rows.
        summarize: Projects a full record onto a summary row.
        detail_prefetch: Fetch ``path/{id}`` before opening the edit dialog.
    """

    name: str
    label: str
    path: str
    record_type: type
    id_field: str
    search_field: str
    messages: Messages
    date_field: str | None = "fecha"
    search_case_insensitive: bool = False
    list_path: str | None = None
    list_type: type | None = None
    summarize: Callable[[Any], Any] | None = None
    detail_prefetch: bool = False
    columns: tuple[str, ...] = field(default_factory=tuple)

    @property
    def row_type(self) -> type:
        """Dataclass of the rows held by the list screen."""
        return self.list_type or self.record_type

    def record_id(self, record: Any) -> str:
        """Return a row's identifier as a string."""
        return stringify(getattr(record, self.id_field))

    def to_row(self, record: Any) -> Any:
        """Convert a full record returned by a write into a list row."""
        if self.summarize and not isinstance(record, self.row_type):
            return self.summarize(record)
        return record

    def item_path(self, record_id: str) -> str:
        return f"{self.path}/{record_id}"


def summarize_proveedor(proveedor: Proveedor) -> ProveedorListItem:
    """Build the ``listAll`` row for a supplier returned by a write."""
    tipo = proveedor.tipo_rif or "N"
    return ProveedorListItem(
        rif=proveedor.rif,
        descripcion=f"{tipo}-{proveedor.rif}, {proveedor.razon_social}",
    )


RESOURCES: tuple[ResourceSpec, ...] = (
    ResourceSpec(
        name="condominio",
        label="Condominio",
        path="/Condominio",
        record_type=Condominio,
        id_field="id",
        search_field="rif_condominio",
        messages=_messages("condominio", "condominios"),
        columns=("id", "nombre", "no_oficina", "monto_pagar"),
    ),
    ResourceSpec(
        name="facturas",
        label="Facturas",
        path="/facturas",
        record_type=Factura,
        id_field="id",
        search_field="rif_proveedor",
        messages=_messages("factura", "facturas", feminine=True),
        columns=("id", "nombre", "rif_proveedor", "total"),
    ),
    ResourceSpec(
        name="impuestos",
        label="Impuestos",
        path="/Impuestos",
        record_type=Impuesto,
        id_field="id",
        search_field="no_factura",
        messages=_messages("impuesto", "impuestos"),
        columns=("id", "no_factura", "tipo", "monto_pagar"),
    ),
    ResourceSpec(
        name="nomina",
        label="Nómina",
        path="/nomina",
        record_type=Nomina,
        id_field="id",
        search_field="id",
        messages=_messages("nómina", "nóminas", feminine=True),
        columns=("id", "fecha", "sueldo"),
    ),
    ResourceSpec(
        name="proveedores",
        label="Proveedores",
        path="/Proveedor",
        record_type=Proveedor,
        id_field="rif",
        search_field="rif",
        messages=_messages("proveedor", "proveedores"),
        date_field=None,
        list_path="/Proveedor/listAll",
        list_type=ProveedorListItem,
        summarize=summarize_proveedor,
        detail_prefetch=True,
        columns=("rif", "descripcion"),
    ),
    ResourceSpec(
        name="seniat",
        label="Seniat",
        path="/seniat",
        record_type=Seniat,
        id_field="id",
        search_field="id",
        messages=_messages("registro de SENIAT", "registros de SENIAT"),
        columns=("id", "periodo_pagar", "tipo", "monto_pagar"),
    ),
    ResourceSpec(
        name="servicios_basicos",
        label="Servicios Básicos",
        path="/serv_basicos",
        record_type=ServicioBasico,
        id_field="id",
        search_field="no_oficina",
        messages=_messages("servicio básico", "servicios básicos"),
        search_case_insensitive=True,
        columns=("id", "mes_pagar", "no_oficina", "servicios_basicos", "monto_pagar"),
    ),
    ResourceSpec(
        name="servicio_telef",
        label="Servicio Telef",
        path="/telef",
        record_type=ServicioTelef,
        id_field="id",
        search_field="rif",
        messages=_messages("registro de Servicio Telef", "registros de Servicio Telef"),
        columns=("id", "nombre", "no_linea", "monto_pagar"),
    ),
    ResourceSpec(
        name="viaticos",
        label="Viáticos",
        path="/viaticos",
        record_type=Viatico,
        id_field="id",
        search_field="cedula",
        messages=_messages("registro de viáticos", "registros de viáticos"),
        columns=("id", "nombre", "cedula", "concepto"),
    ),
    ResourceSpec(
        name="elec_aseo",
        label="Elec & Aseo",
        path="/elec_aseo",
        record_type=ElecAseo,
        id_field="id",
        search_field="id",
        messages=_messages("registro de Elec & Aseo", "registros de Elec & Aseo"),
        columns=("id", "mes_pagar", "no_oficina", "monto_pagar"),
    ),
)

_BY_NAME = {spec.name: spec for spec in RESOURCES}


def get_resource(name: str) -> ResourceSpec:
    """Return the ResourceSpec registered under name."""
    try:
        return _BY_NAME[name.lower()]
    except KeyError as exc:
        msg = f"Unknown resource: {name}"
        raise ValueError(msg) from exc
