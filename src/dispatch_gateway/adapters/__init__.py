"""Adapters – Kafka, OpenTelemetry and FastAPI integrations."""
