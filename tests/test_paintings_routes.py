"""Integration tests for the painting upload, browse and delete flow."""
from __future__ import annotations

from io import BytesIO
from uuid import uuid4

from sqlalchemy import func, select

from conftest import PNG_BYTES, staged_files
from gallery.models import Painting


def _post_painting(client, *, name="Sunset", desc="Evening sky", payload=PNG_BYTES, content_type="image/png"):
    return client.post(
        "/paintings",
        data={"name": name, "desc": desc},
        files={"image": ("sunset.png", BytesIO(payload), content_type)},
        follow_redirects=False,
    )


def test_empty_listing_renders_page(client):
    response = client.get("/paintings")

    assert response.status_code == 200
    assert "No paintings yet." in response.text


def test_upload_redirects_and_lists_painting(client, db_session):
    response = _post_painting(client)

    assert response.status_code == 303
    assert response.headers["location"] == "/paintings"

    listing = client.get("/paintings")
    assert listing.status_code == 200
    assert "Sunset" in listing.text

    paintings = db_session.scalars(select(Painting)).all()
    assert len(paintings) == 1
    assert paintings[0].name == "Sunset"
    assert paintings[0].description == "Evening sky"
    assert paintings[0].image_content_type == "image/png"
    assert paintings[0].image_data == PNG_BYTES


def test_embedded_image_round_trips(client, db_session):
    _post_painting(client)
    painting = db_session.scalars(select(Painting)).one()

    response = client.get(f"/paintings/{painting.id}/image")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content == PNG_BYTES
    assert len(response.content) == len(PNG_BYTES)


def test_transient_file_is_removed_after_embedding(client, upload_dir):
    _post_painting(client)

    assert staged_files(upload_dir) == []


def test_keep_transient_uploads_setting(settings, upload_dir):
    from fastapi.testclient import TestClient

    from gallery.main import create_app

    keep_settings = settings.model_copy(update={"keep_transient_uploads": True})
    with TestClient(create_app(keep_settings)) as keep_client:
        response = _post_painting(keep_client)

    assert response.status_code == 303
    assert len(staged_files(upload_dir)) == 1


def test_detail_renders_painting(client, db_session):
    _post_painting(client)
    painting = db_session.scalars(select(Painting)).one()

    response = client.get(f"/paintings/{painting.id}")

    assert response.status_code == 200
    assert "Sunset" in response.text
    assert f"/paintings/{painting.id}/image" in response.text


def test_detail_of_unknown_key_is_404(client):
    assert client.get(f"/paintings/{uuid4()}").status_code == 404
    assert client.get("/paintings/not-a-key").status_code == 404
    assert client.get(f"/paintings/{uuid4()}/image").status_code == 404


def test_rejected_mime_type_creates_nothing(client, db_session, upload_dir):
    response = _post_painting(client, content_type="image/webp")

    assert response.status_code == 415
    assert "Only image files are allowed!" in response.text
    assert db_session.scalar(select(func.count()).select_from(Painting)) == 0
    assert staged_files(upload_dir) == []
    assert "No paintings yet." in client.get("/paintings").text


def test_delete_removes_painting(client, db_session):
    _post_painting(client)
    painting_id = db_session.scalars(select(Painting)).one().id

    response = client.delete(f"/paintings/{painting_id}", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/paintings"
    assert client.get(f"/paintings/{painting_id}").status_code == 404


def test_delete_unknown_key_is_404_and_leaves_others(client, db_session):
    _post_painting(client)

    response = client.delete(f"/paintings/{uuid4()}", follow_redirects=False)

    assert response.status_code == 404
    assert "Painting not found" in response.text
    assert db_session.scalar(select(func.count()).select_from(Painting)) == 1
    assert "Sunset" in client.get("/paintings").text


def test_listing_after_n_creates(client, db_session):
    for index in range(4):
        _post_painting(client, name=f"Study {index}")

    paintings = db_session.scalars(select(Painting)).all()
    assert len(paintings) == 4
    for painting in paintings:
        assert client.get(f"/paintings/{painting.id}").status_code == 200


def test_missing_image_field_is_rejected(client, db_session):
    response = client.post("/paintings", data={"name": "No file"}, follow_redirects=False)

    assert response.status_code == 422
    assert db_session.scalar(select(func.count()).select_from(Painting)) == 0
