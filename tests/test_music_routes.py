"""Integration tests for the music library flow."""
from __future__ import annotations

from io import BytesIO
from uuid import uuid4

from sqlalchemy import func, select

from conftest import MP3_BYTES, staged_files
from gallery.models import Audio


def _post_audio(client, *, content_type="audio/mpeg", **fields):
    data = {"title": "Nocturne", "description": "Late night piano"}
    data.update(fields)
    return client.post(
        "/music",
        data=data,
        files={"file": ("nocturne.mp3", BytesIO(MP3_BYTES), content_type)},
        follow_redirects=False,
    )


def _count(db_session) -> int:
    return db_session.scalar(select(func.count()).select_from(Audio))


def test_empty_library_renders_page(client):
    response = client.get("/music")

    assert response.status_code == 200
    assert "No music yet." in response.text


def test_upload_stores_audio_with_defaults_and_tags(client, db_session, upload_dir):
    response = _post_audio(client, tags="piano, calm,,night ")

    assert response.status_code == 303
    assert response.headers["location"] == "/music"

    audio = db_session.scalars(select(Audio)).one()
    assert audio.title == "Nocturne"
    assert audio.description == "Late night piano"
    assert audio.artist == "Unknown"
    assert audio.genre == "Unknown"
    assert audio.tags == ["piano", "calm", "night"]
    assert audio.file_content_type == "audio/mpeg"
    assert audio.file_data == MP3_BYTES
    assert audio.plays == 0 and audio.likes == 0
    assert audio.duration is None and audio.format is None
    assert staged_files(upload_dir) == []


def test_explicit_artist_and_genre_are_kept(client, db_session):
    _post_audio(client, artist="Chopin", genre="Classical", content_type="audio/mp3")

    audio = db_session.scalars(select(Audio)).one()
    assert audio.artist == "Chopin"
    assert audio.genre == "Classical"
    assert audio.file_content_type == "audio/mp3"


def test_library_and_detail_render(client, db_session):
    _post_audio(client, artist="Chopin")
    audio = db_session.scalars(select(Audio)).one()

    listing = client.get("/music")
    assert "Nocturne" in listing.text
    assert f"/music/{audio.id}/file" in listing.text

    detail = client.get(f"/music/{audio.id}")
    assert detail.status_code == 200
    assert "Chopin" in detail.text


def test_audio_payload_round_trips(client, db_session):
    _post_audio(client)
    audio = db_session.scalars(select(Audio)).one()

    response = client.get(f"/music/{audio.id}/file")

    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.content == MP3_BYTES


def test_wav_upload_is_rejected_and_library_unchanged(client, db_session, upload_dir):
    _post_audio(client)
    before = _count(db_session)

    response = _post_audio(client, title="Field recording", content_type="audio/wav")

    assert response.status_code == 415
    assert _count(db_session) == before == 1
    assert "Field recording" not in client.get("/music").text
    assert staged_files(upload_dir) == []


def test_title_is_required(client, db_session):
    response = client.post(
        "/music",
        data={"description": "untitled"},
        files={"file": ("a.mp3", BytesIO(MP3_BYTES), "audio/mpeg")},
        follow_redirects=False,
    )

    assert response.status_code == 422
    assert _count(db_session) == 0


def test_blank_title_is_rejected_before_staging(client, db_session, upload_dir):
    response = _post_audio(client, title="   ")

    assert response.status_code == 422
    assert _count(db_session) == 0
    assert staged_files(upload_dir) == []


def test_unknown_detail_is_404(client):
    assert client.get(f"/music/{uuid4()}").status_code == 404
    assert client.get(f"/music/{uuid4()}/file").status_code == 404


def test_delete_existing_and_missing(client, db_session):
    _post_audio(client)
    audio_id = db_session.scalars(select(Audio)).one().id

    missing = client.delete(f"/music/{uuid4()}", follow_redirects=False)
    assert missing.status_code == 404
    assert _count(db_session) == 1

    response = client.delete(f"/music/{audio_id}", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/music"
    assert client.get(f"/music/{audio_id}").status_code == 404

    again = client.delete(f"/music/{audio_id}", follow_redirects=False)
    assert again.status_code == 404
