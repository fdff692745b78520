"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from judge_gate.config.domain.config import GateConfig
from judge_gate.config.domain.judge import TEMPERATURE_WARNING_THRESHOLD
from judge_gate.config.domain.observer import ConfigObserver
from judge_gate.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from judge_gate.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a GateConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> GateConfig:
        """
        Load, interpolate, validate, and return a GateConfig from a YAML file.

        A relative ``persona_dir`` is resolved against the config file's directory.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset
                (all collected first).
            ConfigValidationError: if the document is not a mapping or the
                schema is violated.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        cfg = _build_config(resolved=interpolated)
        cfg = _resolve_persona_dir(cfg=cfg, config_path=path)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path=path)
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> GateConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    try:
        return GateConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_persona_dir(cfg: GateConfig, config_path: Path) -> GateConfig:
    if cfg.persona_dir.is_absolute():
        return cfg
    return cfg.model_copy(
        update={"persona_dir": config_path.parent / cfg.persona_dir}
    )


def _emit_warnings(cfg: GateConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > TEMPERATURE_WARNING_THRESHOLD:
        observer.config_judge_temperature_warning(cfg.judge.temperature)
