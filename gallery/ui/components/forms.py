"""Form field components for the upload and account pages."""
from __future__ import annotations

from markupsafe import Markup, escape


def text_input(name: str, *, label: str, placeholder: str = "", type_: str = "text", required: bool = True) -> Markup:
    required_attr = "required" if required else ""
    return Markup(
        f"""
        <label class=\"field\" for=\"{name}\">
            <span>{escape(label)}</span>
            <input id=\"{name}\" name=\"{name}\" type=\"{type_}\" placeholder=\"{escape(placeholder)}\" {required_attr}>
        </label>
        """
    )


def password_input(name: str, *, label: str, placeholder: str = "", required: bool = True) -> Markup:
    return text_input(name, label=label, placeholder=placeholder, type_="password", required=required)


def textarea(name: str, *, label: str, placeholder: str = "", rows: int = 4, required: bool = False) -> Markup:
    required_attr = "required" if required else ""
    return Markup(
        f"""
        <label class=\"field\" for=\"{name}\">
            <span>{escape(label)}</span>
            <textarea id=\"{name}\" name=\"{name}\" rows=\"{rows}\" placeholder=\"{escape(placeholder)}\" {required_attr}></textarea>
        </label>
        """
    )


def file_input(name: str, *, label: str, accept: str = "image/*", required: bool = True) -> Markup:
    required_attr = "required" if required else ""
    return Markup(
        f"""
        <label class=\"field\" for=\"{name}\">
            <span>{escape(label)}</span>
            <input id=\"{name}\" name=\"{name}\" type=\"file\" accept=\"{accept}\" {required_attr}>
        </label>
        """
    )


__all__ = ["text_input", "password_input", "textarea", "file_input"]
