"""Config settings – GatewaySettings."""
from __future__ import annotations

import dataclasses

from dispatch_gateway.config.settings.base import Settings
from dispatch_gateway.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class GatewaySettings(Settings):
    """Runtime configuration, read once at start-up from ``GATEWAY_*``."""

    _prefix: dataclasses.ClassVar[str] = "GATEWAY"

    service_name: str = "dispatch-gateway"
    host: str = "0.0.0.0"
    port: int = 8080
    kafka_bootstrap_servers: str = "localhost:9093"
    topic: str = "simple"
    dispatch_delay_ms: int = 3000
    max_concurrent_dispatches: int = 100
    shutdown_timeout_seconds: float = 10.0
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.kafka_bootstrap_servers.strip():
            raise InvalidSettingValueError(
                "kafka_bootstrap_servers", self.kafka_bootstrap_servers, "must not be empty"
            )
        if not self.topic.strip():
            raise InvalidSettingValueError("topic", self.topic, "must not be empty")
        if self.dispatch_delay_ms < 0:
            raise InvalidSettingValueError(
                "dispatch_delay_ms", self.dispatch_delay_ms, "must be >= 0"
            )
        if self.max_concurrent_dispatches < 1:
            raise InvalidSettingValueError(
                "max_concurrent_dispatches", self.max_concurrent_dispatches, "must be >= 1"
            )
        if self.shutdown_timeout_seconds < 0:
            raise InvalidSettingValueError(
                "shutdown_timeout_seconds", self.shutdown_timeout_seconds, "must be >= 0"
            )


__all__ = ["GatewaySettings"]
