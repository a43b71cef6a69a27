"""Reusable button components for the UI."""
from __future__ import annotations

from markupsafe import Markup, escape


def primary(label: str, *, id_: str | None = None, href: str | None = None, submit: bool = False) -> Markup:
    """Return a stylised primary button or link."""

    attrs = []
    if id_:
        attrs.append(f'id="{id_}"')

    if href:
        attrs.append(f'href="{href}"')
        tag = "a"
    else:
        tag = "button"
        attrs.append(f"type=\"{'submit' if submit else 'button'}\"")

    attr_str = " ".join(attrs)
    return Markup(f"<{tag} class=\"button button--primary\" {attr_str}>{escape(label)}</{tag}>")


def ghost(label: str, *, href: str) -> Markup:
    """Return a subtle link suitable for secondary actions."""

    return Markup(f"<a class=\"button button--ghost\" href=\"{href}\">{escape(label)}</a>")


def delete_form(action: str, *, label: str = "Delete") -> Markup:
    """Return a form that issues DELETE through the ``_method`` override."""

    return Markup(
        f"""
        <form method=\"post\" action=\"{action}?_method=DELETE\" class=\"inline-form\">
            <button type=\"submit\" class=\"button button--danger\">{escape(label)}</button>
        </form>
        """
    )


__all__ = ["primary", "ghost", "delete_form"]
