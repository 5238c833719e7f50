"""
Reflex UI components for the back office dashboard.

This package provides:
- auth_forms: login, register, password recovery and admin login cards
- filter_panel: module menu, month/year selector and search box
- record_table: record list with banners and pagination
- record_dialog: schema-driven add/edit form, delete prompt, detail view

Components only read BackofficeState vars and trigger its events; all list
logic lives in the ListSyncController.
"""

from backoffice_ui.components.auth_forms import auth_panel
from backoffice_ui.components.filter_panel import filter_panel, module_menu
from backoffice_ui.components.record_dialog import delete_dialog, details_dialog, record_dialog
from backoffice_ui.components.record_table import banners, pagination, record_table

__all__ = [
    "auth_panel",
    "banners",
    "delete_dialog",
    "details_dialog",
    "filter_panel",
    "module_menu",
    "pagination",
    "record_dialog",
    "record_table",
]
