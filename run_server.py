"""Entry point for running the gallery application with Uvicorn."""
from __future__ import annotations

import os

import uvicorn

from gallery.config import get_settings


def main() -> None:
  settings = get_settings()
  reload = os.getenv("UVICORN_RELOAD", "false").lower() == "true"
  uvicorn.run("gallery.main:create_app", factory=True, host=settings.host, port=settings.port, reload=reload)


if __name__ == "__main__":
  main()
