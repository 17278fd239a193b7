"""Required-Field Checks — straight-line validation shared by every write operation.

Invariants:
    - A field is missing when it is None or only whitespace
    - Missing fields reported in the order given

Design Decisions:
    - Services call this even though Pydantic validates at the HTTP boundary:
      the data-access layer is also called from scripts and tests
"""

from onboarding.core.errors import RequiredFieldError


def missing_fields(**values: str | None) -> list[str]:
    """Return the names of fields that are None or blank."""
    return [
        name for name, value in values.items()
        if value is None or not str(value).strip()
    ]


def require_fields(**values: str | None) -> None:
    """Raise RequiredFieldError if any named field is missing."""
    missing = missing_fields(**values)
    if missing:
        raise RequiredFieldError(missing)
