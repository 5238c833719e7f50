"""
Filter panel component: module menu, month/year selector and search box.
"""

import reflex as rx

from backoffice_ui.resources import RESOURCES
from backoffice_ui.state import BackofficeState


def module_menu() -> rx.Component:
    """Build the list of dashboard modules."""
    return rx.box(
        *[
            rx.button(
                spec.label,
                on_click=BackofficeState.select_resource(spec.name),
                variant=rx.cond(BackofficeState.resource == spec.name, "solid", "soft"),
                class_name="module-button",
            )
            for spec in RESOURCES
        ],
        class_name="module-menu",
    )


def filter_panel() -> rx.Component:
    """
    Build the filter row shared by all modules.

    Returns:
        The filter panel component.
    """
    return rx.box(
        rx.el.select(
            rx.el.option("Mes", value="month"),
            rx.el.option("Año", value="year"),
            value=BackofficeState.date_mode,
            on_change=BackofficeState.change_date_mode,
            class_name="date-mode",
        ),
        rx.cond(
            BackofficeState.date_mode == "month",
            rx.input(
                type="month",
                value=BackofficeState.date_value,
                on_change=BackofficeState.change_date_value,
            ),
            rx.input(
                type="number",
                placeholder="Año",
                value=BackofficeState.date_value,
                on_change=BackofficeState.change_date_value,
                debounce_timeout=400,
            ),
        ),
        rx.input(
            placeholder="Buscar...",
            value=BackofficeState.search,
            on_change=BackofficeState.change_search,
            debounce_timeout=300,
            class_name="search-input",
        ),
        class_name="card filter-card",
    )
