"""Layout building blocks shared across pages."""
from __future__ import annotations

import os

from markupsafe import Markup, escape

STATIC_VERSION = os.getenv("STATIC_ASSET_VERSION", "20241019")

NAV_LINKS = (
    ("Home", "/"),
    ("Paintings", "/paintings"),
    ("Music", "/music"),
    ("Dance", "/dance-videos"),
    ("Upload", "/upload"),
)
STYLESHEET = f"/assets/css/gallery.css?v={STATIC_VERSION}"


def navbar(*, active: str | None = None, app_name: str = "Art Gallery") -> Markup:
    links_html: list[str] = []
    for label, href in NAV_LINKS:
        state_class = "nav-link nav-link--active" if active == href else "nav-link"
        links_html.append(f"<a href=\"{href}\" class=\"{state_class}\">{label}</a>")

    return Markup(
        f"""
        <header class=\"site-header\">
            <a href=\"/\" class=\"site-title\">{escape(app_name)}</a>
            <nav class=\"site-nav\">{''.join(links_html)}</nav>
            <div class=\"site-auth\">
                <a href=\"/signin\" class=\"nav-link\">Sign in</a>
                <a href=\"/signup\" class=\"nav-link nav-link--accent\">Sign up</a>
            </div>
        </header>
        """
    )


def empty_state(message: str, *, action_label: str | None = None, action_href: str | None = None) -> Markup:
    action = ""
    if action_label and action_href:
        action = f"<a href=\"{action_href}\" class=\"button button--primary\">{escape(action_label)}</a>"
    return Markup(
        f"""
        <div class=\"empty-state\">
            <p>{escape(message)}</p>
            {action}
        </div>
        """
    )


__all__ = ["navbar", "empty_state", "NAV_LINKS", "STYLESHEET"]
