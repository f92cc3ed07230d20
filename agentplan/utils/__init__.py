"""Utility functions for agentplan."""

from agentplan.utils.identifiers import (
    sanitize_id,
    slot_label,
    slugify_title,
    truncate,
)

__all__ = [
    "sanitize_id",
    "slot_label",
    "slugify_title",
    "truncate",
]
