"""Smoke tests for the static pages and the HTML error surface."""
from __future__ import annotations

import pytest


def test_home_links_to_every_collection(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    for href in ("/paintings", "/music", "/dance-videos", "/upload"):
        assert f'href="{href}"' in response.text


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/signup", "Create an account"),
        ("/signin", "Sign in"),
    ],
)
def test_account_pages_render(client, path, expected):
    response = client.get(path)

    assert response.status_code == 200
    assert expected in response.text
    assert "SignIn/SignUp" in response.text


@pytest.mark.parametrize(
    ("path", "action", "field"),
    [
        ("/upload-paint", "/paintings", 'name="image"'),
        ("/upload-music", "/music", 'name="file"'),
        ("/upload-dance", "/dance-videos", 'name="file"'),
    ],
)
def test_upload_forms_post_to_their_collection(client, path, action, field):
    response = client.get(path)

    assert response.status_code == 200
    assert f'action="{action}"' in response.text
    assert 'enctype="multipart/form-data"' in response.text
    assert field in response.text


def test_upload_index_links_to_each_form(client):
    response = client.get("/upload")

    assert response.status_code == 200
    for href in ("/upload-paint", "/upload-music", "/upload-dance"):
        assert href in response.text


def test_stylesheet_is_served(client):
    response = client.get("/assets/css/gallery.css")

    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Art Gallery"}


def test_unknown_route_renders_error_page(client):
    response = client.get("/sculptures")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "404" in response.text
