"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from dispatch_gateway.config.settings.base import Settings
from dispatch_gateway.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


# Keys are the annotation as written; modules using postponed annotations
# expose them as strings.
_PARSERS: dict[Any, Any] = {
    bool: _parse_bool,
    "bool": _parse_bool,
    int: int,
    "int": int,
    float: float,
    "float": float,
}


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables into a settings class.

    Unset variables fall back to the field default; an unset variable for
    a required field raises :class:`MissingRequiredSettingError`.  Values
    that do not parse as the field's type raise
    :class:`InvalidSettingValueError` naming the variable.
    """

    def load(self, settings_class: type[T]) -> T:
        required = set(settings_class.required_fields())
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(env_key)
                continue
            parse = _PARSERS.get(field.type, str)
            try:
                values[field.name] = parse(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Populate the environment from a ``.env`` file, then read it.

    Variables already set in the process win unless ``override`` is true.
    A missing file is not an error.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
