# core/inputs.py
# Розбір сирих рядків з форми/консолі. Кома як десятковий роздільник теж ок.

from __future__ import annotations

import math
from typing import Optional

from .errors import InputValidationError


def _to_float(raw: str | float | None) -> Optional[float]:
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = raw.strip().replace(",", ".")
        if text == "":
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_positive(raw: str | float | None, label: str) -> float:
    """Dimension or price: must be a number > 0."""
    value = _to_float(raw)
    if value is None or value <= 0:
        raise InputValidationError(f"Please enter a valid {label}")
    return value


def parse_wastage(raw: str | float | None) -> float:
    """Порожньо -> 0. Відʼємне або не число -> помилка."""
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return 0.0
    value = _to_float(raw)
    if value is None or value < 0:
        raise InputValidationError("Please enter a valid wastage percentage (0 or greater)")
    return value


def parse_optional_price(raw: str | float | None) -> Optional[float]:
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return None
    return parse_positive(raw, "price")
