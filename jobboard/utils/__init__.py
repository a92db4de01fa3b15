"""Utility functions for coercing loosely typed record values."""

from .coercion import coerce_identifier, coerce_number, identifiers_equal, round_half_up

__all__ = [
    "coerce_identifier",
    "coerce_number",
    "identifiers_equal",
    "round_half_up",
]
