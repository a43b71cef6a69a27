"""Export page routers for composition."""
from __future__ import annotations

from . import auth, home, uploads

__all__ = [
    "auth",
    "home",
    "uploads",
]
