"""Demo fixtures for every back office resource, keyed by resource name."""

from backoffice_ui.models.records import (
    Condominio,
    ElecAseo,
    Factura,
    Impuesto,
    Nomina,
    Proveedor,
    Seniat,
    ServicioBasico,
    ServicioTelef,
    Viatico,
)

DEMO_RECORDS: dict[str, tuple] = {
    "facturas": (
        Factura(
            id="1", tipo_rif="J", rif_proveedor=301234567, nombre="FERRETERIA EL TORNILLO",
            no_factura=1045, fecha="2024-03-15T14:00:00.000Z", base=1000.0, iva=160.0,
            total=1160.0, retiene_iva=True, retencion_iva=120.0,
        ),
        Factura(
            id="2", tipo_rif="J", rif_proveedor=409876543, nombre="LIMPIEZAS CARACAS",
            no_factura=88, fecha="2024-03-28T16:30:00.000Z", base=450.0, iva=72.0,
            total=522.0, retiene_islr=True, retencion_islr=9.0,
        ),
        Factura(
            id="3", tipo_rif="V", rif_proveedor=12345678, nombre="JOSE PEREZ",
            no_factura=7, fecha="2024-04-02T13:00:00.000Z", base=200.0, iva=32.0,
            total=232.0,
        ),
    ),
    "impuestos": (
        Impuesto(id="1", fecha="2024-03-20T15:00:00.000Z", no_factura=1045, monto_pagar=1.16, tipo="1XMIL"),
        Impuesto(id="2", fecha="2024-04-10T15:00:00.000Z", no_factura=88, monto_pagar=0.52, tipo="1XMIL"),
    ),
    "nomina": (
        Nomina(id="1", fecha="2024-03-31T20:00:00.000Z", sueldo=5200.0, primas=300.0, retenciones_ivss=208.0),
        Nomina(id="2", fecha="2024-04-30T20:00:00.000Z", sueldo=5200.0, aguinaldos=1200.0),
    ),
    "proveedores": (
        Proveedor(
            rif="301234567", tipo_rif="J", razon_social="FERRETERIA EL TORNILLO",
            fecha_vencimiento_rif="2025-06-30T04:00:00.000Z", no_oficina="PB-2",
            direccion="AV. URDANETA, CARACAS", porcentaje_retencion=75.0, id=1,
        ),
        Proveedor(
            rif="409876543", tipo_rif="J", razon_social="LIMPIEZAS CARACAS",
            fecha_vencimiento_rif="2024-12-31T04:00:00.000Z", porcentaje_retencion=100.0, id=2,
        ),
    ),
    "seniat": (
        Seniat(id="1", fecha="2024-03-18T15:00:00.000Z", periodo_pagar="FEB-2024", monto_pagar=950.0, tipo="IVA"),
    ),
    "servicios_basicos": (
        ServicioBasico(
            id="1", fecha="2024-03-05T14:00:00.000Z", mes_pagar="MAR", no_oficina="Of-101",
            monto_pagar=35.5, iva=5.68, servicios_basicos="CORPOELEC",
        ),
        ServicioBasico(
            id="2", fecha="2024-03-06T14:00:00.000Z", mes_pagar="MAR", no_oficina="OF-202",
            monto_pagar=12.0, iva=1.92, servicios_basicos="HIDROCAPITAL",
        ),
    ),
    "servicio_telef": (
        ServicioTelef(
            id="1", fecha="2024-03-12T14:00:00.000Z", mes_pagar="MAR", rif=300000001,
            nombre="CANTV", monto_pagar=18.0, no_oficina="OF-101", no_linea="0212-5550101",
        ),
    ),
    "viaticos": (
        Viatico(id="1", fecha="2024-03-22T12:00:00.000Z", nombre="MARIA GOMEZ", cedula=15678901, cargo="ADMINISTRADORA", concepto="TRASLADO A BANCO"),
    ),
    "condominio": (
        Condominio(
            id="1", fecha="2024-03-01T14:00:00.000Z", mes_pagar="MAR", nombre="RESIDENCIAS EL PARQUE",
            rif_condominio=310000002, no_oficina="OF-101", monto_pagar=80.0,
        ),
    ),
    "elec_aseo": (
        ElecAseo(id="1", fecha="2024-03-08T14:00:00.000Z", mes_pagar="MAR", no_oficina="OF-101", monto_pagar=22.0),
    ),
}
