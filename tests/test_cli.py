from __future__ import annotations

from conftest import zip_bytes
from wsz_kit.io import load_image, read_archive
from wsz_kit.main import main


def test_extract_pack_and_screenshot(tmp_path, skin_archive, capsys):
    skin_path = tmp_path / "cool.wsz"
    skin_path.write_bytes(zip_bytes(skin_archive))

    assert main(["extract", str(skin_path), "--output", str(tmp_path / "cool")]) == 0
    assert (tmp_path / "cool" / "MAIN" / "MAIN_WINDOW_BACKGROUND.png").exists()

    assert main(["pack", str(tmp_path / "cool")]) == 0
    assert "MAIN.BMP" in read_archive(tmp_path / "cool.wsz")

    shot = tmp_path / "shot.png"
    assert main(["screenshot", str(skin_path), "--output", str(shot)]) == 0
    assert load_image(shot).shape == (435, 275, 4)
    assert "Created screenshot" in capsys.readouterr().out


def test_bad_archive_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.wsz"
    path.write_bytes(b"nope")
    assert main(["screenshot", str(path)]) == 1
    assert "ZIP error" in capsys.readouterr().err


def test_pack_current_directory(tmp_path, skin_archive, monkeypatch):
    skin_path = tmp_path / "cool.wsz"
    skin_path.write_bytes(zip_bytes(skin_archive))
    assert main(["extract", str(skin_path), "--output", str(tmp_path / "cool")]) == 0
    skin_path.unlink()

    monkeypatch.chdir(tmp_path / "cool")
    assert main(["pack", "."]) == 0
    assert "MAIN.BMP" in read_archive(tmp_path / "cool.wsz")


def test_missing_config_reports_error(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json"), "screenshot", "x.wsz"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_log_level_reports_error(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"log_level": "VERBOSE"}')
    assert main(["--config", str(path), "screenshot", "x.wsz"]) == 1
    assert "Unknown log level 'VERBOSE'" in capsys.readouterr().err
