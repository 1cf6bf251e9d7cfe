"""Config settings – env-based configuration for the gateway."""
from dispatch_gateway.config.settings.base import Settings
from dispatch_gateway.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from dispatch_gateway.config.settings.factory import SettingsFactory
from dispatch_gateway.config.settings.gateway import GatewaySettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GatewaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
