from __future__ import annotations

import io

import pytest

from conftest import zip_bytes
from wsz_kit.io import decode_image
from wsz_kit.ui import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def _upload(data: bytes):
    return {"skin": (io.BytesIO(data), "skin.wsz")}


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_screenshot(client, skin_archive):
    response = client.post(
        "/screenshot", data=_upload(zip_bytes(skin_archive)), content_type="multipart/form-data"
    )
    assert response.status_code == 200
    assert response.mimetype == "image/png"
    assert decode_image(response.data).shape == (435, 275, 4)


def test_sprites(client, skin_archive):
    response = client.post("/sprites", data=_upload(zip_bytes(skin_archive)), content_type="multipart/form-data")
    payload = response.get_json()
    assert {"name": "MAIN_STEREO", "width": 29, "height": 12} in payload


def test_rejects_bad_upload(client):
    response = client.post("/sprites", data=_upload(b"junk"), content_type="multipart/form-data")
    assert response.status_code == 400
    assert "ZIP error" in response.get_json()["error"]
    assert client.post("/screenshot").status_code == 400
