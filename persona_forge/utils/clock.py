import os

REFERENCE_YEAR_ENV = "PERSONA_FORGE_REFERENCE_YEAR"
DEFAULT_REFERENCE_YEAR = 2025


def reference_year() -> int:
    """The "current year" generators compute ages and dates against.

    Read once at the CLI/API edge. Unset means DEFAULT_REFERENCE_YEAR, so a
    seed verifies against the same profile on every day of the year.
    """
    raw = os.getenv(REFERENCE_YEAR_ENV)
    if not raw:
        return DEFAULT_REFERENCE_YEAR
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{REFERENCE_YEAR_ENV} must be an integer year, got {raw!r}") from None
