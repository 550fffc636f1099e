"""Typed errors, validated container identifiers and container status rules."""

__version__ = "0.1.0"
__all__ = ["container_id", "container_status", "errors"]