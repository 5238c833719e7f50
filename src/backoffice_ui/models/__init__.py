"""
Data models for the back office dashboard.

This package provides:
- Entity schemas (Factura, Proveedor, ServicioBasico, ...) with validated
  conversion to and from the backend's JSON shape
- View-state models (filter criteria, page window, banners, dialogs)

All models use Python dataclasses for type safety and IDE support.
"""

from backoffice_ui.models.common import (
    Banner,
    BannerKind,
    DateMode,
    DialogMode,
    DialogState,
    FilterCriteria,
    PageWindow,
)
from backoffice_ui.models.records import (
    Condominio,
    ElecAseo,
    Factura,
    FormField,
    Impuesto,
    Nomina,
    Proveedor,
    ProveedorListItem,
    Seniat,
    ServicioBasico,
    ServicioTelef,
    Viatico,
    deserialize_record,
    draft_from_form,
    form_fields,
    record_to_draft,
    serialize_draft,
    serialize_record,
)

__all__ = [
    "Banner",
    "BannerKind",
    "Condominio",
    "DateMode",
    "DialogMode",
    "DialogState",
    "ElecAseo",
    "Factura",
    "FilterCriteria",
    "FormField",
    "Impuesto",
    "Nomina",
    "PageWindow",
    "Proveedor",
    "ProveedorListItem",
    "Seniat",
    "ServicioBasico",
    "ServicioTelef",
    "Viatico",
    "deserialize_record",
    "draft_from_form",
    "form_fields",
    "record_to_draft",
    "serialize_draft",
    "serialize_record",
]
