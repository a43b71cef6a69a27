"""Shared fixtures: an isolated app per test backed by SQLite and a temp upload dir."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from gallery.config import Settings
from gallery.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64 + b"sunset"
MP3_BYTES = b"ID3\x04\x00\x00" + b"\xff\xfb" * 128
MP4_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"\x01" * 256

TEST_MAX_VIDEO_BYTES = 4096


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(tmp_path: Path, upload_dir: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'gallery.db'}",
        UPLOAD_DIR=upload_dir,
        MAX_VIDEO_BYTES=TEST_MAX_VIDEO_BYTES,
        KEEP_TRANSIENT_UPLOADS=False,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Yield a TestClient with the lifespan (schema creation) already run."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app: FastAPI, client: TestClient) -> Iterator[Session]:
    with app.state.session_factory() as session:
        yield session


def staged_files(directory: Path) -> list[Path]:
    if not directory.exists():
        return []
    return sorted(path for path in directory.iterdir() if path.is_file())
