"""Command-line adapters."""

__all__ = []
