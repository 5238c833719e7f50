"""
Entity schemas for the back office resources and their wire conversion.

Every entity is a slotted dataclass whose fields are declared with
api_field(), which records the backend's camelCase name and a few flags:

    wire    type sent to the backend when it differs from the Python type
    upper   text typed into forms is upper-cased
    date    ISO instant edited through a wall-clock date-time input
    day     date edited through a date-only input and kept at midnight UTC
    server  assigned by the backend (identifier, timestamps); never in drafts
    choices allowed values for select inputs

Payloads are validated here, at the API boundary: deserialize_record()
rejects responses missing required fields and coerces loosely typed values
(numeric strings, numeric identifiers) to the declared types.
"""

import types
from dataclasses import MISSING, Field, dataclass, field, fields
from datetime import timezone, tzinfo
from typing import Any, Mapping, NamedTuple, TypeVar, Union, get_args, get_origin

from backoffice_ui.errors import RecordValidationError
from backoffice_ui.utils.date_helpers import map_date_to_iso
from backoffice_ui.utils.list_helpers import stringify

R = TypeVar("R")

MES_PAGAR_OPTIONS = (
    "ENE", "FEB", "MAR", "ABR", "MAY", "JUN",
    "JUL", "AGO", "SEP", "OCT", "NOV", "DIC",
)
SERVICIOS_BASICOS_OPTIONS = (
    "HIDROCAPITAL", "CORPOELEC", "ASEO", "CANTV", "MOVISTAR", "MOVILNET", "DIGITEL",
)


def api_field(
    name: str,
    *,
    wire: type | None = None,
    upper: bool = False,
    date: bool = False,
    day: bool = False,
    server: bool = False,
    choices: tuple[str, ...] = (),
    default: Any = MISSING,
) -> Any:
    """Declare a dataclass field together with its backend name and flags."""
    metadata = {
        "api": name,
        "wire": wire,
        "upper": upper,
        "date": date or day,
        "day": day,
        "server": server,
        "choices": choices,
    }
    if default is MISSING:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)


# --------------------------------------------------------------------------- #
# Entities
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class Factura:
    """Supplier invoice with its withholding breakdown."""

    id: str = api_field("id", server=True)
    tipo_rif: str = api_field("tipoRif", upper=True)
    rif_proveedor: int = api_field("rifProveedor")
    nombre: str = api_field("nombre", upper=True)
    no_factura: int = api_field("noFactura")
    fecha: str = api_field("fecha", date=True)
    base: float = api_field("base")
    iva: float = api_field("iva")
    total: float = api_field("total")
    retiene_iva: bool = api_field("retieneIva", default=False)
    retencion_iva: float = api_field("retencionIva", default=0.0)
    retiene_islr: bool = api_field("retieneIslr", default=False)
    retencion_islr: float = api_field("retencionIslr", default=0.0)
    retiene_1x_mil: bool = api_field("retiene1xMil", default=False)
    retencion_1x_mil: float = api_field("retencion1xMil", default=0.0)
    retiene_115: bool = api_field("retiene115", default=False)
    retencion_115: float = api_field("retencion115", default=0.0)


@dataclass(slots=True)
class Impuesto:
    """Municipal tax payment tied to an invoice number."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    no_factura: int = api_field("noFactura")
    monto_pagar: float = api_field("montoPagar")
    tipo: str = api_field("tipo", upper=True)


@dataclass(slots=True)
class Nomina:
    """Payroll run."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    sueldo: float = api_field("sueldo")
    primas: float = api_field("primas", default=0.0)
    complementos: float = api_field("complementos", default=0.0)
    asistencia_se: float = api_field("asistenciaSE", default=0.0)
    aguinaldos: float = api_field("aguinaldos", default=0.0)
    bono_vacacional: float = api_field("bonoVacacional", default=0.0)
    otras_subvenciones: float = api_field("otrasSubvenciones", default=0.0)
    prestaciones_sociales: float = api_field("prestacionesSociales", default=0.0)
    retenciones_ivss: float = api_field("retencionesIVSS", default=0.0)
    retencion_spf: float = api_field("retencionSPF", default=0.0)
    retencion_faov: float = api_field("retencionFAOV", default=0.0)
    comisiones_bancarias: float = api_field("comisionesBancarias", default=0.0)


@dataclass(slots=True)
class Proveedor:
    """Supplier master record, keyed by its tax id (RIF)."""

    rif: str = api_field("rif")
    tipo_rif: str = api_field("tipoRif", upper=True)
    razon_social: str = api_field("razonSocial", upper=True)
    fecha_vencimiento_rif: str = api_field("fechaVencimientoRif", date=True)
    no_oficina: str = api_field("noOficina", upper=True, default="")
    direccion: str = api_field("direccion", upper=True, default="")
    porcentaje_retencion: float = api_field("porcentaje_retencion", default=0.0)
    id: int | None = api_field("id", server=True, default=None)


@dataclass(slots=True)
class ProveedorListItem:
    """Row of the supplier summary list (``/Proveedor/listAll``)."""

    rif: str = api_field("rif")
    descripcion: str = api_field("descripcion")


@dataclass(slots=True)
class Seniat:
    """National tax authority (SENIAT) payment."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    periodo_pagar: str = api_field("periodoPagar", upper=True)
    monto_pagar: float = api_field("montoPagar")
    tipo: str = api_field("tipo", upper=True)


@dataclass(slots=True)
class ServicioBasico:
    """Utility bill per office; the backend stores amounts as strings."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", day=True)
    mes_pagar: str = api_field("mesPagar", choices=MES_PAGAR_OPTIONS)
    no_oficina: str = api_field("noOficina", upper=True)
    monto_pagar: float = api_field("montoPagar", wire=str)
    iva: float = api_field("iva", wire=str, default=0.0)
    servicios_basicos: str = api_field(
        "serviciosBasicos", choices=SERVICIOS_BASICOS_OPTIONS, default=""
    )
    contrato_control_telefono: str = api_field("contratoControlTelefono", default="")
    created_at: str | None = api_field("createdAt", server=True, default=None)
    updated_at: str | None = api_field("updatedAt", server=True, default=None)
    deleted_at: str | None = api_field("deletedAt", server=True, default=None)


@dataclass(slots=True)
class ServicioTelef:
    """Phone line bill."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    mes_pagar: str = api_field("mesPagar", choices=MES_PAGAR_OPTIONS)
    rif: int = api_field("rif")
    nombre: str = api_field("nombre", upper=True)
    monto_pagar: float = api_field("montoPagar")
    no_oficina: str = api_field("noOficina", upper=True, default="")
    no_linea: str = api_field("noLinea", default="")


@dataclass(slots=True)
class Viatico:
    """Travel expense claim."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    nombre: str = api_field("nombre", upper=True)
    cedula: int = api_field("cedula")
    cargo: str = api_field("cargo", upper=True, default="")
    concepto: str = api_field("concepto", upper=True, default="")


@dataclass(slots=True)
class Condominio:
    """Condominium fee per office."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    mes_pagar: str = api_field("mesPagar", choices=MES_PAGAR_OPTIONS)
    nombre: str = api_field("nombre", upper=True)
    rif_condominio: int = api_field("rifCondominio")
    no_oficina: str = api_field("noOficina", upper=True)
    monto_pagar: float = api_field("montoPagar")


@dataclass(slots=True)
class ElecAseo:
    """Electricity and waste collection bill."""

    id: str = api_field("id", server=True)
    fecha: str = api_field("fecha", date=True)
    mes_pagar: str = api_field("mesPagar", choices=MES_PAGAR_OPTIONS)
    no_oficina: str = api_field("noOficina", upper=True)
    monto_pagar: float = api_field("montoPagar")


# --------------------------------------------------------------------------- #
# Schema helpers
# --------------------------------------------------------------------------- #


class FormField(NamedTuple):
    """Describes one input of an add/edit dialog."""

    name: str
    label: str
    kind: str
    choices: tuple[str, ...] = ()


def _base_type(tp: Any) -> tuple[type, bool]:
    """Return (type, optional) for ``X`` or ``X | None`` annotations."""
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return args[0], True
    return tp, False


def _is_required(f: Field) -> bool:
    return f.default is MISSING and f.default_factory is MISSING


def _to_number(value: Any, target: type, name: str) -> int | float:
    if isinstance(value, bool):
        return target(value)
    if isinstance(value, (int, float)):
        return target(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            # Non-numeric text counts as zero, like parseFloat(x) || 0
            return target(0)
        return target(number)
    raise RecordValidationError(f"Field {name!r} is not numeric: {value!r}", [name])


def _coerce(value: Any, tp: Any, name: str) -> Any:
    target, optional = _base_type(tp)
    if value is None:
        if optional:
            return None
        raise RecordValidationError(f"Field {name!r} is required", [name])
    if target is bool:
        if isinstance(value, str):
            return value.strip().lower() in {"true", "1", "on", "yes"}
        if isinstance(value, (bool, int, float)):
            return bool(value)
    elif target in (int, float):
        return _to_number(value, target, name)
    elif target is str:
        if isinstance(value, (str, int, float, bool)):
            return stringify(value)
    else:
        return value
    raise RecordValidationError(f"Field {name!r} has unexpected value {value!r}", [name])


def _to_wire(value: Any, f: Field) -> Any:
    wire = f.metadata.get("wire")
    if wire is str and value is not None:
        return stringify(value) or "0"
    return value


def api_name(cls: type, attr: str) -> str:
    """Return the backend name of a dataclass attribute."""
    for f in fields(cls):
        if f.name == attr:
            return f.metadata.get("api", f.name)
    raise KeyError(f"{cls.__name__} has no field {attr!r}")


def deserialize_record(cls: type[R], payload: Mapping[str, Any]) -> R:
    """
    Validate a backend payload and build the entity dataclass.

    Args:
        cls: Entity dataclass.
        payload: Decoded JSON object from the backend.

    Returns:
        Entity instance with coerced values.

    Raises:
        RecordValidationError: If the payload is not an object, lacks
            required fields, or holds values that cannot be coerced.
    """
    if not isinstance(payload, Mapping):
        raise RecordValidationError(f"{cls.__name__} payload must be an object: {payload!r}")

    missing = [
        f.name
        for f in fields(cls)
        if _is_required(f) and payload.get(f.metadata.get("api", f.name)) is None
    ]
    if missing:
        raise RecordValidationError(
            f"{cls.__name__} is missing fields: {', '.join(missing)}", missing
        )

    values = {}
    for f in fields(cls):
        key = f.metadata.get("api", f.name)
        # null in an optional column falls back to the field default
        if payload.get(key) is None:
            continue
        values[f.name] = _coerce(payload[key], f.type, f.name)
    return cls(**values)


def serialize_record(record: Any) -> dict[str, Any]:
    """Convert an entity to its backend JSON shape, identifier included."""
    return {
        f.metadata.get("api", f.name): _to_wire(getattr(record, f.name), f)
        for f in fields(record)
    }


def serialize_draft(cls: type, draft: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert a draft (attribute name -> value) to a create/update payload.

    Server-assigned fields are dropped. Required fields that are absent or
    blank raise RecordValidationError, which stands in for the browser's
    required-input check.
    """
    missing = [
        f.name
        for f in fields(cls)
        if not f.metadata.get("server")
        and _is_required(f)
        and (draft.get(f.name) is None or draft.get(f.name) == "")
    ]
    if missing:
        raise RecordValidationError(
            f"{cls.__name__} draft is missing fields: {', '.join(missing)}", missing
        )

    payload = {}
    for f in fields(cls):
        if f.metadata.get("server") or f.name not in draft:
            continue
        value = _coerce(draft[f.name], f.type, f.name)
        payload[f.metadata.get("api", f.name)] = _to_wire(value, f)
    return payload


def record_to_draft(record: Any) -> dict[str, Any]:
    """Return the editable values of a record, keyed by attribute name."""
    return {
        f.name: getattr(record, f.name)
        for f in fields(record)
        if not f.metadata.get("server")
    }


def form_fields(cls: type) -> list[FormField]:
    """Describe the inputs needed to edit an entity."""
    result = []
    for f in fields(cls):
        if f.metadata.get("server"):
            continue
        target, _ = _base_type(f.type)
        choices = f.metadata.get("choices", ())
        if choices:
            kind = "select"
        elif f.metadata.get("day"):
            kind = "date"
        elif f.metadata.get("date"):
            kind = "datetime-local"
        elif target is bool:
            kind = "checkbox"
        elif target in (int, float):
            kind = "number"
        else:
            kind = "text"
        result.append(FormField(f.name, f.name.replace("_", " ").title(), kind, choices))
    return result


def draft_from_form(
    cls: type, form_data: Mapping[str, Any], tz: tzinfo | None = None
) -> dict[str, Any]:
    """
    Turn raw form values into a typed draft.

    Checkboxes absent from the submission are False, blank numbers and dates
    are left out, date-time inputs become UTC instants, date-only inputs
    become midnight UTC and flagged text is upper-cased.

    Raises:
        ValueError: If a date-time input is malformed.
    """
    draft: dict[str, Any] = {}
    for f in fields(cls):
        if f.metadata.get("server"):
            continue
        target, _ = _base_type(f.type)
        raw = form_data.get(f.name)
        if target is bool:
            draft[f.name] = _coerce(raw, bool, f.name) if raw is not None else False
            continue
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        if f.metadata.get("day"):
            draft[f.name] = map_date_to_iso(str(raw)[:10], timezone.utc)
        elif f.metadata.get("date"):
            draft[f.name] = map_date_to_iso(str(raw), tz)
        elif target in (int, float):
            draft[f.name] = _coerce(raw, target, f.name)
        else:
            text = stringify(raw)
            draft[f.name] = text.upper() if f.metadata.get("upper") else text
    return draft
