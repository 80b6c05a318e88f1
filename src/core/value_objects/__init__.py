"""
Objets valeur immutables representant des concepts du domaine sans identite.
"""

from src.core.value_objects.coercion import (
    Number,
    format_number,
    to_completed,
    to_number,
)

__all__ = [
    "Number",
    "format_number",
    "to_completed",
    "to_number",
]
