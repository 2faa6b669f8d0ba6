"""Tests for the vec2d command-line calculator."""

from __future__ import annotations

import logging
import math

import pytest

from vec2d import Vector2, cli
from vec2d.config import settings


@pytest.fixture(autouse=True)
def _restore_runtime_state():
    yield
    settings.apply_runtime_settings(settings.VectorSettings())
    package_logger = logging.getLogger("vec2d")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


def _run(capsys, *argv: str) -> str:
    assert cli.main(list(argv)) == 0
    return capsys.readouterr().out.strip()


def _parse_vector(text: str) -> Vector2:
    assert text.startswith("Vector2(") and text.endswith(")")
    x, y = text[len("Vector2("):-1].split(", ")
    return Vector2(float(x), float(y))


def test_magnitude(capsys):
    assert _run(capsys, "magnitude", "3", "4") == "5.0"


def test_direction_in_radians(capsys):
    assert float(_run(capsys, "direction", "0", "1")) == pytest.approx(math.pi / 2)


def test_direction_in_degrees(capsys):
    assert float(_run(capsys, "--angle-unit", "degrees", "direction", "0", "1")) == pytest.approx(90.0)


def test_negative_components_are_positional(capsys):
    assert _run(capsys, "add", "-1", "2", "3", "-4") == "Vector2(2.0, -2.0)"


def test_sub(capsys):
    assert _run(capsys, "sub", "5", "7", "2", "3") == "Vector2(3.0, 4.0)"


def test_products(capsys):
    assert _run(capsys, "dot", "1", "2", "3", "4") == "11.0"
    assert _run(capsys, "cross", "1", "2", "3", "4") == "-2.0"


def test_scale_and_normalize(capsys):
    assert _run(capsys, "scale", "1", "2", "2") == "Vector2(2.0, 4.0)"
    assert _parse_vector(_run(capsys, "normalize", "3", "4")) == (0.6, 0.8)
    assert _run(capsys, "normalize", "0", "0") == "Vector2(0.0, 0.0)"


def test_equals_uses_tolerance(capsys):
    assert _run(capsys, "equals", "1", "2", "1", "2") == "True"
    assert _run(capsys, "equals", "1", "2", "1", "2.1") == "False"
    assert _run(capsys, "--equality-epsilon", "0.5", "equals", "1", "2", "1", "2.1") == "True"


def test_rotations(capsys):
    assert _parse_vector(_run(capsys, "rotate", "1", "0", str(math.pi / 2))) == (0.0, 1.0)
    assert _parse_vector(_run(capsys, "rotate-over", "2", "0", "1", "0", str(math.pi))) == (0.0, 0.0)
    assert _parse_vector(_run(capsys, "set-direction", "3", "4", str(math.pi))) == (-5.0, 0.0)


def test_rotate_in_degrees(capsys):
    output = _run(capsys, "--angle-unit", "degrees", "rotate", "1", "0", "90")
    assert _parse_vector(output) == (0.0, 1.0)


def test_point_towards(capsys):
    output = _run(capsys, "point-towards", "1", "0", "0", "1")
    assert _parse_vector(output) == (-math.sqrt(0.5), math.sqrt(0.5))


def test_angle_unit_from_config_file(capsys, tmp_path):
    config = tmp_path / "vec2d.yaml"
    config.write_text("angle_unit: degrees\n", encoding="utf-8")
    assert float(_run(capsys, "--config", str(config), "direction", "-1", "0")) == pytest.approx(180.0)


def test_angle_unit_from_env(capsys, monkeypatch):
    monkeypatch.setenv("VEC2D_ANGLE_UNIT", "degrees")
    assert float(_run(capsys, "direction", "0", "-1")) == pytest.approx(-90.0)


def test_invalid_settings_exit_with_status_one(capsys):
    assert cli.main(["--equality-epsilon", "5", "magnitude", "1", "1"]) == 1
    assert capsys.readouterr().out == ""


def test_missing_command_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_debug_log_written_to_file(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("VEC2D_LOG_DIR", str(tmp_path))
    _run(capsys, "--debug-log-level", "debug", "--debug-log-file", "run.log", "normalize", "0", "0")
    log_text = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "normalize() on a zero vector" in log_text


def test_directory_as_config_exits_with_status_one(capsys, tmp_path):
    assert cli.main(["--config", str(tmp_path), "magnitude", "3", "4"]) == 1
    assert capsys.readouterr().out == ""
