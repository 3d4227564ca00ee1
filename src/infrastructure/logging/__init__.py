"""Logging helpers package."""

__all__ = []
