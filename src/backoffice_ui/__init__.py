"""
Back office UI: a Reflex dashboard for condominium and accounting records.

This package lists, filters and edits the records of a REST back office
(facturas, impuestos, nómina, proveedores, servicios...) with one generic
list controller shared by every module.

Subpackages:
- components: Reflex UI components
- models: Record schemas, filters and view state
- services: Data access layer (demo and HTTP implementations)
- data: Static demo fixtures
- lib: Logging, HTTP client and session storage helpers
- utils: Date and list helpers

Main entry points:
- controller.ListSyncController: list/filter/paginate/CRUD logic
- app.main(): Start the development server
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
