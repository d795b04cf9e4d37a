"""Configuration loading for declgen (tsconfig.declaration.json)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import DeclaratorConfig

DEFAULT_CONFIG_NAME = "tsconfig.declaration.json"

_YAML_SUFFIXES = {".yml", ".yaml"}


class ConfigurationError(RuntimeError):
    """Raised when the configuration document is missing or incomplete."""


def load_config(
    config_path: str | Path | None = None, *, cwd: str | Path | None = None
) -> DeclaratorConfig:
    """Load and validate the configuration document.

    ``rootDir`` and ``outFile`` are resolved against ``cwd`` (the process
    working directory by default). Nothing on disk is modified here.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    config_file = (base / Path(config_path or DEFAULT_CONFIG_NAME).expanduser()).resolve()

    if not config_file.is_file():
        raise ConfigurationError(f"The TypeScript config file path not found at: {config_file}")

    data = _read_document(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file} must contain a mapping at the root")

    compiler_options = _as_dict(data.get("compilerOptions"))
    root_dir = _as_str(compiler_options.get("rootDir"))
    if not root_dir:
        raise ConfigurationError(f"Expected rootDir option in {config_file} compilerOptions")
    out_file = _as_str(compiler_options.get("outFile"))
    if not out_file:
        raise ConfigurationError(f"Expected outFile option in {config_file} compilerOptions")

    return DeclaratorConfig(
        config_path=config_file,
        root_dir=(base / root_dir).resolve(),
        out_file=(base / out_file).resolve(),
        include=_as_str_list(data.get("include")),
        exclude=_as_str_list(data.get("exclude")),
    )


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["ConfigurationError", "DEFAULT_CONFIG_NAME", "load_config"]
