"""
Shared configuration loading and validation helpers.

Provides:
 - `load_config`: basic YAML loader
 - `load_logging_config`: validated `logging` section
 - `load_defaults`: validated `defaults` section used by the CLI
 - `resolve_config_path`: explicit path, else the bundled configs/config.yaml
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from fsutils.base.file_io import DEFAULT_ENCODING, read_yaml


ConfigDict = Dict[str, Any]

DEFAULT_CONFIG_FILENAME = "config.yaml"
LOGGING_SECTION_KEY = "logging"
DEFAULTS_SECTION_KEY = "defaults"
CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"
DEFAULT_CONFIG_PATH = CONFIGS_DIR / DEFAULT_CONFIG_FILENAME

ROOT_ALLOWED_KEYS = {LOGGING_SECTION_KEY, DEFAULTS_SECTION_KEY}
LOGGING_ALLOWED_KEYS = {"level", "use_rich", "log_dir", "file_prefix"}
DEFAULTS_ALLOWED_KEYS = {"encoding", "dry_run", "progress"}
BOOLEAN_FIELDS = {"dry_run", "progress"}

YES_VALUES = {"1", "true", "yes", "y", "on"}
NO_VALUES = {"0", "false", "no", "n", "off"}
AUTO_VALUES = {"auto", "default", ""}

BUILTIN_DEFAULTS: ConfigDict = {
    "encoding": DEFAULT_ENCODING,
    "dry_run": False,
    "progress": False,
}


def load_config(path: str | Path | None) -> Mapping[str, Any] | Dict[str, Any]:
    if not path:
        return {}

    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {cfg_path}")

    try:
        data = read_yaml(cfg_path)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration root must be a mapping in {cfg_path}")

    unknown = set(data) - ROOT_ALLOWED_KEYS
    if unknown:
        raise ValueError(
            f"Unknown configuration section(s) {', '.join(sorted(map(str, unknown)))} in {cfg_path}"
        )
    return data


def resolve_config_path(config_path: str | Path | None) -> Optional[Path]:
    if config_path:
        return Path(config_path).expanduser().resolve()
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _coerce_yes_no(value: object, key: str, config_path: Optional[Path]) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, str)):
        lowered = str(value).strip().lower()
        if lowered in YES_VALUES:
            return True
        if lowered in NO_VALUES:
            return False
    raise ValueError(f"Field '{key}' must be a yes/no value in {config_path}")


def _coerce_use_rich(value: object, config_path: Optional[Path]) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in AUTO_VALUES:
        return None
    return _coerce_yes_no(value, "use_rich", config_path)


def _extract_section(
    root: Mapping[str, Any],
    key: str,
    allowed: set[str],
    config_path: Optional[Path],
) -> Dict[str, Any]:
    section = root.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{key}' section must be a mapping in {config_path}")
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(
            f"Unknown key(s) {', '.join(sorted(map(str, unknown)))} in '{key}' section of {config_path}"
        )
    return dict(section)


def load_logging_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    resolved = resolve_config_path(config_path)
    root = load_config(resolved)
    cfg = _extract_section(root, LOGGING_SECTION_KEY, LOGGING_ALLOWED_KEYS, resolved)
    if "use_rich" in cfg:
        cfg["use_rich"] = _coerce_use_rich(cfg["use_rich"], resolved)
    if cfg.get("log_dir") and resolved is not None:
        log_dir = Path(str(cfg["log_dir"])).expanduser()
        if not log_dir.is_absolute():
            log_dir = resolved.parent / log_dir
        cfg["log_dir"] = str(log_dir.resolve())
    return cfg


def load_defaults(config_path: str | Path | None = None) -> ConfigDict:
    """Merge the `defaults` section over the built-in defaults."""
    resolved = resolve_config_path(config_path)
    root = load_config(resolved)
    section = _extract_section(root, DEFAULTS_SECTION_KEY, DEFAULTS_ALLOWED_KEYS, resolved)

    cfg = dict(BUILTIN_DEFAULTS)
    for key, value in section.items():
        if key in BOOLEAN_FIELDS:
            cfg[key] = _coerce_yes_no(value, key, resolved)
        elif key == "encoding":
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Field 'encoding' must be a non-empty string in {resolved}")
            try:
                codecs.lookup(value.strip())
            except LookupError as exc:
                raise ValueError(f"Unknown encoding '{value.strip()}' in {resolved}") from exc
            cfg[key] = value.strip()
    return cfg
