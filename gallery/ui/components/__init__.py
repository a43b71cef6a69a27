"""Expose reusable UI components."""
from __future__ import annotations

from . import buttons, cards, forms, layout

__all__ = [
    "buttons",
    "cards",
    "forms",
    "layout",
]
