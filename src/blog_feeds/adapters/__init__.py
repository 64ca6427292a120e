"""Adapters around the core pipeline."""
