"""
Reflex application entry point for the back office dashboard.

This module initializes the Reflex app and defines the login page and the
main dashboard layout.
"""

import os

import reflex as rx

from backoffice_ui.components import (
    auth_panel,
    delete_dialog,
    details_dialog,
    filter_panel,
    module_menu,
    record_dialog,
    record_table,
)
from backoffice_ui.lib import logs
from backoffice_ui.lib.clients import API_URL
from backoffice_ui.state import APP_TITLE, SERVICE_KIND, BackofficeState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("BACKOFFICE_APP_PORT", "8000"))
LOG.info("BACKOFFICE_SERVICE: %s", SERVICE_KIND)
LOG.info("BACKOFFICE_API_URL: %s", API_URL)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the title bar with the signed-in user."""
    return rx.hstack(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.hstack(
            rx.text(BackofficeState.user_email, class_name="muted"),
            rx.cond(
                BackofficeState.is_authenticated,
                rx.button("Cerrar sesión", variant="soft", on_click=BackofficeState.logout),
            ),
        ),
        justify="between",
        class_name="page-header",
    )


def dashboard() -> rx.Component:
    """
    Build the dashboard layout.

    Returns:
        The menu, filters, table and dialogs for the selected module.
    """
    return rx.hstack(
        module_menu(),
        rx.box(
            filter_panel(),
            record_table(),
            record_dialog(),
            delete_dialog(),
            details_dialog(),
            width="100%",
        ),
        align="start",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component.
    """
    return rx.box(
        rx.box(
            page_header(),
            rx.cond(BackofficeState.is_authenticated, dashboard(), auth_panel()),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[_FONT_URL],
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=BackofficeState.on_load,
)


def main() -> None:
    """Entrypoint used by `backoffice-ui`; production deployments use `reflex run`."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
