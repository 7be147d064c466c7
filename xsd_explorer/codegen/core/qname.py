"""Namespace prefix helpers for qualified schema names."""


def get_ns_prefix(name: str) -> str:
    """Return the prefix of ``prefix:local``, or "" unless exactly one colon."""
    parts = name.split(":")
    if len(parts) == 2:
        return parts[0]
    return ""


def trim_ns_prefix(name: str) -> str:
    """Return the local part of ``prefix:local``, or the name unchanged."""
    parts = name.split(":")
    if len(parts) == 2:
        return parts[1]
    return name
