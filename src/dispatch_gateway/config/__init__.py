"""Config – 12-factor settings and loaders."""

from dispatch_gateway.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    GatewaySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from dispatch_gateway.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GatewaySettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
