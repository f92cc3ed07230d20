"""Identifier and label helpers shared by the exporters."""

import re

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_id(value: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore."""
    return _NON_ALNUM.sub("_", value)


def slot_label(slot_name: str) -> str:
    """Display form of a data slot name ("raw_email" -> "raw email")."""
    return slot_name.replace("_", " ")


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending with "..." when cut."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def slugify_title(title: str) -> str:
    """Lower-case a title and join its words with hyphens."""
    return _WHITESPACE.sub("-", title.strip().lower())
