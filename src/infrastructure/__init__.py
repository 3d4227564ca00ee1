"""Infrastructure adapters: database, REST, settings and logging."""

__all__ = []
