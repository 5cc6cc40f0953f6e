"""Input parsing and random array generation."""

from quicktrace.loader.parser import generate_values, parse_values, resolve_values

__all__ = ["generate_values", "parse_values", "resolve_values"]
