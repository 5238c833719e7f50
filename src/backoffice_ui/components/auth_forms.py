"""
Sign-in cards shown while no session token is stored.

One card is visible at a time, selected by BackofficeState.auth_view:
login, register, forgot (password recovery) or admin (API key login).
"""

import reflex as rx

from backoffice_ui.state import BackofficeState


def _link(text: str, view: str) -> rx.Component:
    return rx.link(text, on_click=BackofficeState.show_auth_view(view), size="2")


def _feedback() -> rx.Component:
    return rx.fragment(
        rx.cond(
            BackofficeState.login_error != "",
            rx.callout(BackofficeState.login_error, icon="triangle-alert", color_scheme="red"),
        ),
        rx.cond(
            BackofficeState.auth_notice != "",
            rx.callout(BackofficeState.auth_notice, icon="info", color_scheme="blue"),
        ),
    )


def _card(title: str, *children: rx.Component, on_submit, submit_label: str) -> rx.Component:
    return rx.card(
        rx.form(
            rx.vstack(
                rx.heading(title, size="5"),
                *children,
                _feedback(),
                rx.button(submit_label, type="submit", width="100%"),
            ),
            on_submit=on_submit,
        ),
        class_name="login-card",
    )


def login_form() -> rx.Component:
    """Email and password login, with links to the other cards."""
    return rx.vstack(
        _card(
            "Iniciar sesión",
            rx.input(name="email", type="email", placeholder="Correo electrónico", required=True),
            rx.input(name="password", type="password", placeholder="Contraseña", required=True),
            on_submit=BackofficeState.login,
            submit_label="Entrar",
        ),
        rx.hstack(
            rx.text("¿No tienes cuenta?", size="2"),
            _link("Regístrate", "register"),
        ),
        _link("¿Olvidaste tu contraseña?", "forgot"),
        _link("Acceso de administrador", "admin"),
    )


def register_form() -> rx.Component:
    """Account creation with email, password and phone number."""
    return rx.vstack(
        _card(
            "Registrarse",
            rx.input(name="email", type="email", placeholder="Ingrese su correo electrónico", required=True),
            rx.input(name="password", type="password", placeholder="Ingrese su contraseña", required=True),
            rx.input(name="phone_number", type="tel", placeholder="Ingrese su número de teléfono", required=True),
            on_submit=BackofficeState.register,
            submit_label="Registrarse",
        ),
        _link("Volver a iniciar sesión", "login"),
    )


def forgot_password_form() -> rx.Component:
    return rx.vstack(
        _card(
            "Recuperar Contraseña",
            rx.input(name="email", type="email", placeholder="Correo electrónico", required=True),
            on_submit=BackofficeState.forgot_password,
            submit_label="Enviar enlace",
        ),
        _link("Volver a iniciar sesión", "login"),
    )


def admin_login_form() -> rx.Component:
    return rx.vstack(
        _card(
            "Admin Login",
            rx.input(name="api_key", type="text", placeholder="Ingrese su clave API", required=True),
            on_submit=BackofficeState.login_admin,
            submit_label="Entrar",
        ),
        _link("Volver a iniciar sesión", "login"),
    )


def auth_panel() -> rx.Component:
    """Return the card selected by the current auth view."""
    return rx.match(
        BackofficeState.auth_view,
        ("register", register_form()),
        ("forgot", forgot_password_form()),
        ("admin", admin_login_form()),
        login_form(),
    )
