"""Shared field transforms for request schemas."""


def strip_required(v: str, field_name: str) -> str:
    """Strip whitespace; reject values that become empty."""
    v = v.strip()
    if not v:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


def strip_optional(v: str | None) -> str | None:
    """Strip whitespace; blank optional text is stored as NULL."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def reject_null(v, field_name: str):
    """Explicit null is not a valid value for a non-nullable column."""
    if v is None:
        raise ValueError(f"{field_name} cannot be null")
    return v
