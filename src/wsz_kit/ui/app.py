"""Flask app that previews uploaded skins."""

from __future__ import annotations

import io
from typing import Optional, Tuple

from flask import Flask, Response, jsonify, request, send_file

from wsz_kit.config import Config, load_config
from wsz_kit.errors import SkinError
from wsz_kit.io import encode_image
from wsz_kit.skin import Skin


def _uploaded_skin() -> Tuple[Optional[Skin], Optional[Tuple[Response, int]]]:
    upload = request.files.get("skin")
    if upload is None:
        return None, (jsonify({"error": "Missing 'skin' file upload"}), 400)
    try:
        return Skin.from_bytes(upload.read()), None
    except SkinError as exc:
        return None, (jsonify({"error": str(exc)}), 400)


def create_app(config: Optional[Config] = None) -> Flask:
    app = Flask(__name__)
    app.config["WSZ_CONFIG"] = config or load_config()

    @app.route("/health")
    def health() -> Response:
        return jsonify({"status": "ok"})

    @app.route("/screenshot", methods=["POST"])
    def screenshot():
        skin, error = _uploaded_skin()
        if error:
            return error
        settings: Config = app.config["WSZ_CONFIG"]
        png = encode_image(skin.render_screenshot(background=settings.background_color), "PNG")
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=settings.screenshot_name)

    @app.route("/sprites", methods=["POST"])
    def sprites():
        skin, error = _uploaded_skin()
        if error:
            return error
        payload = [
            {"name": name, "width": int(sprite.shape[1]), "height": int(sprite.shape[0])}
            for name, sprite in sorted(skin.sprites.items())
        ]
        return jsonify(payload)

    return app
