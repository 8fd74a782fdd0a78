import logging

import pytest

from common import settings
from common.env import env_bool, env_int
from common.logging import resolve_level, setup_default_logging
from util import utils
from util.color import lerp_color, parse_hex_color, rgba8, to_hex
from util.paths import ensure_render_dir, frame_filename


@pytest.mark.parametrize(
    "raw, rgba",
    [
        ("#FF8800", (255, 136, 0, 255)),
        ("0x00ff0080", (0, 255, 0, 128)),
        ("a9a9a9", (169, 169, 169, 255)),
    ],
)
def test_parse_hex_color(raw, rgba):
    assert parse_hex_color(raw) == rgba


@pytest.mark.parametrize("bad", ["#FFF", "#GG0000", 12])
def test_parse_hex_color_rejects(bad):
    with pytest.raises(ValueError):
        parse_hex_color(bad)  # type: ignore[arg-type]


def test_rgba8_and_lerp():
    assert rgba8("#FFFFFF", 0.5) == (255, 255, 255, 128)
    assert rgba8("#FFFFFF", 3.0)[3] == 255
    assert to_hex(300, -4, 16) == "#FF0010"
    assert lerp_color("#000000", "#FFFFFF", 0.5) == "#808080"
    assert lerp_color("#102030", "#FFFFFF", 0.0) == "#102030"


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("PPH_T_INT", "0")
    monkeypatch.setenv("PPH_T_BOOL", "yes")
    assert env_int("PPH_T_INT", 5, min_value=1) == 1
    assert env_bool("PPH_T_BOOL") is True
    assert env_bool("PPH_T_MISSING", True) is True


def test_settings_reload(monkeypatch):
    monkeypatch.setenv("PPH_CANVAS_WIDTH", "640")
    monkeypatch.setenv("PPH_LOG_LEVEL", "debug")
    monkeypatch.setenv("PPH_DEBUG_TRANSITIONS", "1")
    try:
        settings.reload_from_env()
        s = settings.get()
        assert s.CANVAS_WIDTH == 640
        assert s.LOG_LEVEL == "DEBUG"
        assert s.DEBUG_TRANSITIONS is True
        assert resolve_level(None) == logging.DEBUG
    finally:
        monkeypatch.undo()
        settings.reload_from_env()
    assert settings.get().CANVAS_WIDTH == 1024


def test_setup_default_logging_is_noop_with_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    setup_default_logging("WARNING")
    if before:
        assert root.handlers == before
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(10) == 10


def test_frame_filename():
    assert frame_filename(7, 60) == "frame_0007.png"
    assert frame_filename(12345, 20000) == "frame_12345.png"


def test_ensure_render_dir(tmp_path):
    out = ensure_render_dir(tmp_path / "a" / "b")
    assert out.is_dir()


def test_load_config_merges_root_over_default(tmp_path, monkeypatch):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "canvas: {width: 100}\nrender: {frames: 4}\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("render: {frames: 9}\n", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)
    cfg = utils.load_config()
    assert cfg["canvas"] == {"width": 100}
    assert cfg["render"] == {"frames": 9}


def test_load_config_is_fail_soft(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("{: broken", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)
    assert utils.load_config() == {}


def test_load_preset_file_is_strict(tmp_path):
    with pytest.raises(FileNotFoundError):
        utils.load_preset_file(tmp_path / "nope.yaml")
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert utils.load_preset_file(empty) == {}
