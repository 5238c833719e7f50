"""
Record table component with banners and pagination controls.
"""

import reflex as rx

from backoffice_ui.state import BackofficeState


def banners() -> rx.Component:
    """Build the transient success and error banners."""
    return rx.box(
        rx.cond(
            BackofficeState.success_message != "",
            rx.callout(BackofficeState.success_message, icon="check", color_scheme="green"),
        ),
        rx.cond(
            BackofficeState.error_message != "",
            rx.callout(BackofficeState.error_message, icon="triangle-alert", color_scheme="red"),
        ),
        class_name="banners",
    )


def _row(row: rx.Var) -> rx.Component:
    return rx.table.row(
        rx.foreach(BackofficeState.columns, lambda column: rx.table.cell(row[column])),
        rx.table.cell(
            rx.hstack(
                rx.icon_button(
                    rx.icon("eye"), size="1", variant="soft",
                    on_click=BackofficeState.show_details(row["_id"]),
                ),
                rx.icon_button(
                    rx.icon("pencil"), size="1", variant="soft",
                    on_click=BackofficeState.open_edit(row["_id"]),
                ),
                rx.icon_button(
                    rx.icon("trash-2"), size="1", variant="soft", color_scheme="red",
                    on_click=BackofficeState.request_delete(row["_id"]),
                ),
            )
        ),
    )


def _empty_row() -> rx.Component:
    return rx.table.row(
        rx.table.cell("No hay registros disponibles", col_span=10, class_name="muted"),
    )


def pagination() -> rx.Component:
    """Build the previous/numbered/next page buttons."""
    return rx.hstack(
        rx.button(
            "Anterior",
            on_click=BackofficeState.go_to_page(BackofficeState.page - 1),
            disabled=BackofficeState.page <= 1,
            variant="soft",
        ),
        rx.foreach(
            BackofficeState.page_numbers,
            lambda number: rx.button(
                number,
                on_click=BackofficeState.go_to_page(number),
                variant=rx.cond(BackofficeState.page == number, "solid", "soft"),
            ),
        ),
        rx.button(
            "Siguiente",
            on_click=BackofficeState.go_to_page(BackofficeState.page + 1),
            disabled=BackofficeState.page >= BackofficeState.total_pages,
            variant="soft",
        ),
        class_name="pagination",
    )


def record_table() -> rx.Component:
    """
    Build the table for the selected module.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.hstack(
            rx.heading(BackofficeState.resource_label, size="5", as_="h3"),
            rx.button(rx.icon("plus"), "Agregar", on_click=BackofficeState.open_add),
            justify="between",
        ),
        banners(),
        rx.cond(
            BackofficeState.is_loading,
            rx.text("Cargando...", class_name="muted"),
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.foreach(
                            BackofficeState.columns,
                            lambda column: rx.table.column_header_cell(column),
                        ),
                        rx.table.column_header_cell("Acciones"),
                    )
                ),
                rx.table.body(
                    rx.cond(
                        BackofficeState.is_empty,
                        _empty_row(),
                        rx.foreach(BackofficeState.rows, _row),
                    )
                ),
            ),
        ),
        pagination(),
        class_name="card results",
        id="results-container",
    )
