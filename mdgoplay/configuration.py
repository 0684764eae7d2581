"""Typed helpers for parsing markdown-goplay configuration dictionaries."""

from __future__ import annotations

import os

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from mdgoplay.constants import DEFAULT_FENCE, DEFAULT_LANGUAGE
from mdgoplay.exceptions import GoPlayConfigError

CONFIG_SECTION = "markdown_goplay"
DEFAULT_CONFIG_PATH = Path("configs/default_config.yaml")
ENV_WORKDIR = "MDGOPLAY_WORKDIR"
ENV_GO_BINARY = "MDGOPLAY_GO_BINARY"


def _ensure_path(
    value: Optional[str | Path], *, config_root: Path
) -> Optional[Path]:
    if value is None or value == "":
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (config_root / path).resolve()
    return path


def _section(
    data: Mapping[str, Any], key: str, *, where: str
) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise GoPlayConfigError(f"'{where}.{key}' must be a mapping")
    return dict(value)


def _coerce_bool(value: Any, *, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise GoPlayConfigError(f"{name} must be true or false, got {value!r}")


def _coerce_timeout(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise GoPlayConfigError(
            f"runtime.timeout_s must be a number, got {value!r}"
        ) from exc
    if timeout <= 0:
        raise GoPlayConfigError("runtime.timeout_s must be positive")
    return timeout


@dataclass(frozen=True)
class RuntimeSettings:
    binary: Optional[str] = None
    timeout_s: Optional[float] = None
    temp_dir: Optional[Path] = None
    unique_temp_files: bool = False


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    log_file: Optional[Path] = None


@dataclass(frozen=True)
class GoPlaySettings:
    workdir: Optional[Path] = None
    language: str = DEFAULT_LANGUAGE
    fence: str = DEFAULT_FENCE
    runtime: RuntimeSettings = field(default_factory=RuntimeSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


def load_config(config_path: Path) -> Dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file '{config_path}' not found.")
    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise GoPlayConfigError(
            f"Config file '{config_path}' must contain a mapping"
        )
    return data


def build_settings(
    config: Optional[Mapping[str, Any]] = None,
    *,
    config_root: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GoPlaySettings:
    """Parse a raw config mapping, with environment fallbacks."""

    config_root = config_root or Path.cwd()
    env = os.environ if environ is None else environ
    goplay_cfg = _section(config or {}, CONFIG_SECTION, where="config")
    runtime_cfg = _section(goplay_cfg, "runtime", where=CONFIG_SECTION)
    logging_cfg = _section(goplay_cfg, "logging", where=CONFIG_SECTION)

    fence = str(goplay_cfg.get("fence") or DEFAULT_FENCE)
    language = str(goplay_cfg.get("language") or DEFAULT_LANGUAGE).lower()

    runtime_settings = RuntimeSettings(
        binary=runtime_cfg.get("binary") or env.get(ENV_GO_BINARY) or None,
        timeout_s=_coerce_timeout(runtime_cfg.get("timeout_s")),
        temp_dir=_ensure_path(
            runtime_cfg.get("temp_dir"), config_root=config_root
        ),
        unique_temp_files=_coerce_bool(
            runtime_cfg.get("unique_temp_files", False),
            name="runtime.unique_temp_files",
        ),
    )
    logging_settings = LoggingSettings(
        level=str(logging_cfg.get("level", "INFO")).upper(),
        log_file=_ensure_path(
            logging_cfg.get("log_file"), config_root=config_root
        ),
    )
    return GoPlaySettings(
        workdir=_ensure_path(
            goplay_cfg.get("workdir") or env.get(ENV_WORKDIR),
            config_root=config_root,
        ),
        language=language,
        fence=fence,
        runtime=runtime_settings,
        logging=logging_settings,
    )


__all__ = [
    "CONFIG_SECTION",
    "DEFAULT_CONFIG_PATH",
    "GoPlaySettings",
    "LoggingSettings",
    "RuntimeSettings",
    "build_settings",
    "load_config",
]
