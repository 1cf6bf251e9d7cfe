"""Kernel – error hierarchy and messaging primitives."""
