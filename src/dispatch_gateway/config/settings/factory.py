"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from dispatch_gateway.config.settings.base import Settings
from dispatch_gateway.config.settings.loaders import SettingsLoader
from dispatch_gateway.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Build a settings object from several sources.

    Each loader produces a complete instance; its field values are layered
    over those of the loaders before it.  *overrides* go on top.  Errors
    raised by a loader abort construction, so a malformed ``GATEWAY_PORT``
    is reported instead of being masked by the default.

    Usage::

        settings = SettingsFactory.create(
            GatewaySettings,
            loaders=[DotenvSettingsLoader()],
            overrides={"dispatch_delay_ms": 0},
        )
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        values: dict[str, Any] = {}
        for loader in loaders or ():
            values.update(dataclasses.asdict(loader.load(settings_cls)))
        values.update(overrides or {})

        missing = [name for name in settings_cls.required_fields() if name not in values]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Cannot build {settings_cls.__name__}: {exc}", cause=exc
            ) from exc


__all__ = ["SettingsFactory"]
