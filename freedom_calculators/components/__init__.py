"""Expose component submodules for convenience."""

from . import charts, forms, tables  # noqa: F401

__all__ = ["charts", "forms", "tables"]
