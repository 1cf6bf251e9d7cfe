"""Observability – structured logging and tracing ports."""
