"""Scheme storage on disk."""

from dynamic_colors.io.store import SchemeStore, resolve_scheme_directory

__all__ = ["SchemeStore", "resolve_scheme_directory"]
