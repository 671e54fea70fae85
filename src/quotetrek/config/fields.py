"""Input fields — the single "parse or default" rule and types built on it.

Every numeric value that crosses into the engine (form fields, persisted
decimal strings, catalog rates) goes through these helpers.  Anything that
cannot be read as a number becomes the default instead of raising, so a
half-filled builder form still prices.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator


DEFAULT_BED_SIZE = 2
MAX_COUNT = 1_000_000


def parse_numeric_or_default(value: Any, default: float = 0.0) -> float:
    """Read ``value`` as a float, returning ``default`` when that fails.

    Accepts ints, floats, numeric strings (``"1200.50"``, ``" 80 "``) and
    bools.  ``None``, empty strings, non-numeric strings, NaN and infinities
    all yield ``default``.
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_amount(value: Any) -> float:
    """Monetary amount: parsed, never negative."""
    return max(0.0, parse_numeric_or_default(value))


def to_count(value: Any) -> int:
    """Headcount / nights / quantity: parsed, truncated, within 0..MAX_COUNT."""
    return min(MAX_COUNT, max(0, int(parse_numeric_or_default(value))))


def to_optional_id(value: Any) -> int | None:
    """Entity reference: ``None`` when absent or unparseable."""
    number = parse_numeric_or_default(value, default=math.nan)
    if math.isnan(number):
        return None
    return int(number)


def to_flag(value: Any) -> bool:
    """Checkbox-style flag: ``"false"``, ``"0"``, ``""`` and ``None`` are off."""
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false", "no", "off")
    return bool(value)


def to_optional_text(value: Any) -> str | None:
    """Free-text selection (e.g. a meal-plan name): blank becomes ``None``."""
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def to_optional_date(value: Any) -> date | None:
    """Calendar date from a date, datetime or ISO string; otherwise ``None``.

    Stored timestamps (``"2025-03-07T00:00:00.000Z"``) keep only their date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def none_to_empty_list(value: Any) -> Any:
    """A ``null`` selection list means nothing selected."""
    return [] if value is None else value


def none_to_empty_mapping(value: Any) -> Any:
    """A ``null`` sub-form validates as its all-defaults model."""
    return {} if value is None else value


def parse_bed_size(value: Any) -> int:
    """Room bed-size, defaulting to 2.

    Mirrors integer parsing of form input: ``"3"`` and ``3`` give 3,
    ``"3.7"`` gives 3.  Missing, unparseable and non-positive values give
    the default.  Sizes outside 2-5 are returned as-is; rate lookup falls
    back to the 2-bed price for them.  Capped at ``MAX_COUNT``.
    """
    number = parse_numeric_or_default(value, default=math.nan)
    if math.isnan(number):
        return DEFAULT_BED_SIZE
    size = min(MAX_COUNT, int(number))
    return size if size > 0 else DEFAULT_BED_SIZE


# ═══════════════════════════════════════════════════════════════════════════
# Annotated field types used by the config models
# ═══════════════════════════════════════════════════════════════════════════

Amount = Annotated[float, BeforeValidator(to_amount)]
"""Non-negative currency value; malformed input becomes 0."""

Count = Annotated[int, BeforeValidator(to_count)]
"""Non-negative integer; malformed input becomes 0."""

OptionalId = Annotated[int | None, BeforeValidator(to_optional_id)]
"""Entity reference; malformed input becomes ``None``."""

Flag = Annotated[bool, BeforeValidator(to_flag)]
"""Checkbox flag; ``None`` and "false"-like strings become ``False``."""

BedSize = Annotated[int, BeforeValidator(parse_bed_size)]
"""Room bed-size; missing or malformed input becomes 2."""

OptionalText = Annotated[str | None, BeforeValidator(to_optional_text)]
"""Optional name; blank input becomes ``None``."""

OptionalDate = Annotated[date | None, BeforeValidator(to_optional_date)]
"""Calendar date; malformed input becomes ``None``."""
