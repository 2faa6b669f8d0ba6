"""Runtime settings for vector comparisons, angle handling and logging."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml

from .constants import ANGLE_UNITS, DEFAULTS

logger = logging.getLogger("vec2d.config")

_PATH_FIELDS = {"LOG_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL", "ANGLE_UNIT"}
_FLOAT_FIELDS = {"EQUALITY_EPSILON"}

EQUALITY_EPSILON = DEFAULTS["EQUALITY_EPSILON"]
ANGLE_UNIT = DEFAULTS["ANGLE_UNIT"]

CONFIG_ENV_VAR = "VEC2D_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/vec2d.yaml")
LOG_DIRECTORY = Path("logs")
DEBUG_LOG_FILE = ""
DEBUG_LOG_LEVEL = DEFAULTS["DEBUG_LOG_LEVEL"]


@dataclass(frozen=True)
class VectorSettings:
    EQUALITY_EPSILON: float = EQUALITY_EPSILON
    ANGLE_UNIT: str = ANGLE_UNIT
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL

    def with_updates(self, overrides: Dict[str, Any]) -> "VectorSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return VectorSettings(**merged)


_ACTIVE_SETTINGS = VectorSettings()
_ENV_VARS: Dict[str, str] = {
    "EQUALITY_EPSILON": "VEC2D_EQUALITY_EPSILON",
    "ANGLE_UNIT": "VEC2D_ANGLE_UNIT",
    "LOG_DIRECTORY": "VEC2D_LOG_DIR",
    "DEBUG_LOG_FILE": "VEC2D_DEBUG_LOG",
    "DEBUG_LOG_LEVEL": "VEC2D_DEBUG_LOG_LEVEL",
}


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _FLOAT_FIELDS:
        return float(value)
    raise ValueError(f"Unsupported settings field {field}")


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_numeric(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _FLOAT_FIELDS:
        return _normalize_numeric(value)
    raise ValueError(f"Unsupported settings field {field}")


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "EQUALITY_EPSILON": (1e-15, 1.0),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
    "ANGLE_UNIT": set(ANGLE_UNITS),
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str):
            # Log levels are upper case, angle units lower case.
            for candidate in (current.upper(), current.lower()):
                if candidate in choices:
                    values[field] = candidate
                    break
            else:
                raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(VectorSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def add_runtime_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--equality-epsilon", type=float, help="Absolute tolerance used by vector equality")
    parser.add_argument("--angle-unit", type=str, help="Unit for angles read and printed by the CLI (radians or degrees)")
    parser.add_argument("--debug-log-level", type=str, help="Logging level name")
    parser.add_argument("--debug-log-file", type=str, help="Log file name inside the log directory (stderr when empty)")
    return parser


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load vec2d runtime settings with overrides")
    return add_runtime_arguments(parser)


def settings_from_namespace(parsed: argparse.Namespace, env: Mapping[str, str] | None = None) -> VectorSettings:
    env_mapping = os.environ if env is None else env
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "EQUALITY_EPSILON": parsed.equality_epsilon,
        "ANGLE_UNIT": parsed.angle_unit,
        "DEBUG_LOG_LEVEL": parsed.debug_log_level,
        "DEBUG_LOG_FILE": parsed.debug_log_file,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return VectorSettings().with_updates(overrides)


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> VectorSettings:
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    return settings_from_namespace(parsed, env)


def apply_runtime_settings(new_settings: VectorSettings) -> VectorSettings:
    global _ACTIVE_SETTINGS
    global EQUALITY_EPSILON, ANGLE_UNIT
    global LOG_DIRECTORY, DEBUG_LOG_FILE, DEBUG_LOG_LEVEL

    _ACTIVE_SETTINGS = new_settings
    EQUALITY_EPSILON = new_settings.EQUALITY_EPSILON
    ANGLE_UNIT = new_settings.ANGLE_UNIT
    LOG_DIRECTORY = new_settings.LOG_DIRECTORY
    DEBUG_LOG_FILE = new_settings.DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL = new_settings.DEBUG_LOG_LEVEL
    return _ACTIVE_SETTINGS


def current_settings() -> VectorSettings:
    return _ACTIVE_SETTINGS


def _initial_settings(env: Mapping[str, str]) -> VectorSettings:
    try:
        return VectorSettings().with_updates(_collect_env_overrides(env))
    except ValueError as error:
        logger.warning("Ignoring invalid VEC2D_* environment settings, using defaults: %s", error)
        return VectorSettings()


apply_runtime_settings(_initial_settings(os.environ))
