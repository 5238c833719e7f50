"""
Reflex state management for the back office dashboard.

The state is a thin, serializable mirror of one ListSyncController per
(browser client, resource). Every event forwards to the controller and then
copies the rendered page, banners and dialog back into state vars.
"""

import asyncio
import os
from typing import Any

import reflex as rx

from backoffice_ui.controller import BANNER_SECONDS, ListSyncController
from backoffice_ui.errors import ApiError, describe_error
from backoffice_ui.lib import logs
from backoffice_ui.models.common import DialogMode, FilterCriteria
from backoffice_ui.models.records import draft_from_form, form_fields, serialize_record
from backoffice_ui.registry import ClientRegistry
from backoffice_ui.resources import ResourceSpec, get_resource
from backoffice_ui.services import get_auth_service
from backoffice_ui.utils import format_display_date, format_display_day, stringify

LOG = logs.logger(__file__)

# Configuration from environment
SERVICE_KIND = os.getenv("BACKOFFICE_SERVICE", "impl").lower()
REQUIRE_LOGIN = SERVICE_KIND != "demo"
DEFAULT_RESOURCE = "proveedores"

APP_TITLE = "Panel Administrativo"
AUTH_VIEWS = ("login", "register", "forgot", "admin")

CLIENTS = ClientRegistry(SERVICE_KIND)


def _display(spec: ResourceSpec, column: str, record: Any) -> str:
    value = getattr(record, column, None)
    if column == spec.date_field:
        return format_display_day(value)
    return stringify(value)


def _form_value(kind: str, value: Any) -> str:
    if value is None:
        return ""
    if kind == "datetime-local":
        return format_display_date(value) if value else ""
    if kind == "date":
        return format_display_day(value)
    if kind == "checkbox":
        return "true" if value else ""
    return stringify(value)


class BackofficeState(rx.State):
    """
    Main application state for the dashboard.

    Handles module selection, filters, pagination, dialogs and banners.
    """

    # Session
    is_authenticated: bool = not REQUIRE_LOGIN
    user_email: str = "Usuario"
    login_error: str = ""
    auth_view: str = "login"
    auth_notice: str = ""

    # Filters
    resource: str = DEFAULT_RESOURCE
    date_mode: str = "month"
    date_value: str = ""
    search: str = ""

    # Rendered page
    columns: list[str] = []
    rows: list[dict[str, str]] = []
    page: int = 1
    total_pages: int = 1
    total: int = 0
    is_loading: bool = False

    # Banners
    success_message: str = ""
    error_message: str = ""

    # Add/edit dialog
    dialog_mode: str = "none"
    form: list[dict[str, str]] = []
    choices: dict[str, list[str]] = {}

    # Delete confirmation
    pending_delete_id: str = ""
    confirm_prompt: str = ""

    # Detail view
    detail: list[dict[str, str]] = []
    detail_open: bool = False

    @rx.var
    def resource_label(self) -> str:
        return get_resource(self.resource).label

    @rx.var
    def is_empty(self) -> bool:
        """Check if the "no records" row should be shown."""
        return not self.is_loading and self.total == 0

    @rx.var
    def page_numbers(self) -> list[int]:
        return list(range(1, self.total_pages + 1))

    @rx.var
    def dialog_open(self) -> bool:
        return self.dialog_mode != DialogMode.NONE.value

    def _client(self) -> str:
        return self.router.session.client_token

    def _ctrl(self) -> ListSyncController:
        return CLIENTS.controller(self._client(), self.resource)

    def _sync(self) -> None:
        """Copy the controller's view into state vars."""
        ctrl = self._ctrl()
        spec = ctrl.resource
        window = ctrl.window
        self.columns = list(spec.columns)
        self.rows = [
            {"_id": spec.record_id(record), **{c: _display(spec, c, record) for c in spec.columns}}
            for record in window.items
        ]
        self.page = window.page
        self.total_pages = window.total_pages
        self.total = window.total
        self.is_loading = ctrl.loading
        self.success_message = ctrl.success_message or ""
        self.error_message = ctrl.error_message or ""

        self.dialog_mode = ctrl.dialog.mode.value
        if ctrl.dialog.is_open:
            fields = form_fields(spec.record_type)
            self.form = [
                {
                    "name": f.name,
                    "label": f.label,
                    "kind": f.kind,
                    "value": _form_value(f.kind, ctrl.dialog.draft.get(f.name)),
                }
                for f in fields
            ]
            self.choices = {f.name: list(f.choices) for f in fields if f.choices}
        else:
            self.form = []

    def _criteria(self) -> FilterCriteria | None:
        try:
            return FilterCriteria(self.date_mode, self.date_value, self.search)
        except ValueError:
            LOG.info("Ignoring incomplete filter value: %s", self.date_value)
            return None

    def _reload(self):
        criteria = self._criteria()
        if criteria is None:
            return None
        self._ctrl().load(criteria)
        self._sync()
        return BackofficeState.clear_banners

    @rx.event
    def on_load(self):
        """Event handler for initial page load."""
        session = CLIENTS.session(self._client())
        if REQUIRE_LOGIN:
            self.is_authenticated = session.is_authenticated
            if not self.is_authenticated:
                return None
        self.user_email = session.user_email or "Usuario"
        return self._reload()

    @rx.event
    def show_auth_view(self, view: str):
        """Switch between the login, register, forgot-password and admin cards."""
        self.auth_view = view if view in AUTH_VIEWS else "login"
        self.login_error = ""
        self.auth_notice = ""

    def _auth(self):
        self.login_error = ""
        self.auth_notice = ""
        return get_auth_service(CLIENTS.session(self._client()))

    @rx.event
    def login(self, form_data: dict):
        """Log in with the credentials entered in the login form."""
        auth = self._auth()
        try:
            auth.login(form_data.get("email", ""), form_data.get("password", ""))
        except ApiError as exc:
            LOG.warning("Login failed: %s", exc)
            self.login_error = describe_error(exc, "Error al iniciar sesión.")
            return None
        return BackofficeState.on_load

    @rx.event
    def login_admin(self, form_data: dict):
        """Log in as administrator with the shared API key."""
        auth = self._auth()
        try:
            auth.login_admin(form_data.get("api_key", ""))
        except ApiError as exc:
            LOG.warning("Admin login failed: %s", exc)
            self.login_error = describe_error(exc, "Error al iniciar sesión como administrador.")
            return None
        self.auth_view = "login"
        return BackofficeState.on_load

    @rx.event
    def register(self, form_data: dict):
        """Create an account, then go back to the login card."""
        auth = self._auth()
        try:
            auth.register(
                form_data.get("email", ""),
                form_data.get("password", ""),
                form_data.get("phone_number", ""),
            )
        except ApiError as exc:
            LOG.warning("Registration failed: %s", exc)
            self.login_error = describe_error(exc, "Error al crear el usuario. Intenta nuevamente.")
            return
        self.auth_view = "login"
        self.auth_notice = "Usuario creado. Inicia sesión."

    @rx.event
    def forgot_password(self, form_data: dict):
        auth = self._auth()
        try:
            auth.forgot_password(form_data.get("email", ""))
        except ApiError as exc:
            LOG.warning("Password recovery failed: %s", exc)
            self.auth_notice = "Hubo un error. Intenta nuevamente."
            return
        self.auth_notice = "Si el correo está registrado, recibirás un enlace de recuperación."

    @rx.event
    def logout(self):
        """End the session and release everything held for this browser."""
        client = self._client()
        CLIENTS.session(client).logout()
        CLIENTS.release(client)
        self.is_authenticated = not REQUIRE_LOGIN
        self.auth_view = "login"
        self.rows = []
        self.total = 0

    @rx.event
    def select_resource(self, resource: str):
        self.resource = get_resource(resource).name
        self.detail_open = False
        return self._reload()

    @rx.event
    def change_date_mode(self, mode: str):
        self.date_mode = mode
        self.date_value = ""
        return self._reload()

    @rx.event
    def change_date_value(self, value: str):
        self.date_value = value
        return self._reload()

    @rx.event
    def change_search(self, value: str):
        self.search = value
        return self._reload()

    @rx.event
    def go_to_page(self, page: int):
        self._ctrl().set_page(int(page))
        self._sync()

    @rx.event
    def open_add(self):
        self._ctrl().open_add_dialog()
        self._sync()

    @rx.event
    def open_edit(self, record_id: str):
        self._ctrl().open_edit_dialog(record_id)
        self._sync()
        return BackofficeState.clear_banners

    @rx.event
    def close_dialog(self):
        self._ctrl().close_dialog()
        self._sync()

    @rx.event
    def submit_dialog(self, form_data: dict):
        """Create or update from the submitted dialog form."""
        ctrl = self._ctrl()
        try:
            draft = draft_from_form(ctrl.resource.record_type, form_data)
        except ValueError as exc:
            LOG.warning("Invalid form data: %s", exc)
            self.error_message = "Fecha inválida."
            return BackofficeState.clear_banners
        ctrl.submit_dialog(draft)
        self._sync()
        return BackofficeState.clear_banners

    @rx.event
    def request_delete(self, record_id: str):
        self.pending_delete_id = record_id
        self.confirm_prompt = self._ctrl().resource.messages.confirm_delete

    @rx.event
    def cancel_delete(self):
        self.pending_delete_id = ""

    @rx.event
    def confirm_delete(self):
        """Delete the pending record; the user already answered the prompt."""
        record_id, self.pending_delete_id = self.pending_delete_id, ""
        if record_id:
            self._ctrl().remove(record_id, confirm=lambda _prompt: True)
        self._sync()
        return BackofficeState.clear_banners

    @rx.event
    def show_details(self, record_id: str):
        record = self._ctrl().show_details(record_id)
        if record is None:
            self._sync()
            return BackofficeState.clear_banners
        self.detail = [
            {"label": key, "value": stringify(value)}
            for key, value in serialize_record(record).items()
        ]
        self.detail_open = True
        return None

    @rx.event
    def close_details(self):
        self.detail_open = False

    @rx.event(background=True)
    async def clear_banners(self):
        """Hide banners once they expire."""
        await asyncio.sleep(BANNER_SECONDS)
        async with self:
            self._sync()
