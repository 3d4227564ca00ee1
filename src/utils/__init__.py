"""Shared utilities package."""

from .decimal_utils import parse_decimal
from .utils import get_project_root

__all__ = ["parse_decimal", "get_project_root"]
