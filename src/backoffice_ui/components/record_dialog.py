"""
Dialogs for adding, editing, deleting and inspecting records.

The add/edit form is generated from the entity schema, so every module
shares the same dialog.
"""

import reflex as rx

from backoffice_ui.state import BackofficeState


def _input(field: rx.Var) -> rx.Component:
    return rx.box(
        rx.text(field["label"], as_="label", size="2"),
        rx.match(
            field["kind"],
            (
                "checkbox",
                rx.checkbox(name=field["name"], default_checked=field["value"] == "true"),
            ),
            (
                "select",
                rx.el.select(
                    rx.el.option("Seleccione...", value=""),
                    rx.foreach(
                        BackofficeState.choices[field["name"]],
                        lambda choice: rx.el.option(choice, value=choice),
                    ),
                    name=field["name"],
                    default_value=field["value"],
                ),
            ),
            rx.input(
                name=field["name"],
                type=field["kind"],
                default_value=field["value"],
            ),
        ),
        class_name="form-field",
    )


def record_dialog() -> rx.Component:
    """Build the add/edit dialog."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(
                rx.cond(BackofficeState.dialog_mode == "add", "Agregar registro", "Editar registro")
            ),
            rx.form(
                rx.vstack(
                    rx.foreach(BackofficeState.form, _input),
                    rx.hstack(
                        rx.button("Cancelar", type="button", variant="soft", on_click=BackofficeState.close_dialog),
                        rx.button("Guardar", type="submit"),
                        justify="end",
                    ),
                ),
                on_submit=BackofficeState.submit_dialog,
                reset_on_submit=False,
            ),
        ),
        open=BackofficeState.dialog_open,
    )


def delete_dialog() -> rx.Component:
    """Build the delete confirmation prompt."""
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title("Eliminar"),
            rx.alert_dialog.description(BackofficeState.confirm_prompt),
            rx.hstack(
                rx.alert_dialog.cancel(
                    rx.button("Cancelar", variant="soft", on_click=BackofficeState.cancel_delete),
                ),
                rx.alert_dialog.action(
                    rx.button("Eliminar", color_scheme="red", on_click=BackofficeState.confirm_delete),
                ),
                justify="end",
            ),
        ),
        open=BackofficeState.pending_delete_id != "",
    )


def details_dialog() -> rx.Component:
    """Build the read-only detail view."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Detalles"),
            rx.data_list.root(
                rx.foreach(
                    BackofficeState.detail,
                    lambda item: rx.data_list.item(
                        rx.data_list.label(item["label"]),
                        rx.data_list.value(item["value"]),
                    ),
                ),
            ),
            rx.button("Cerrar", variant="soft", on_click=BackofficeState.close_details),
        ),
        open=BackofficeState.detail_open,
    )
