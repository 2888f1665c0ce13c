"""Adapters for external systems and infrastructure."""
