# core/errors.py
# Помилки розрахунку. Всі наслідують ValueError, тож API ловить їх як і раніше.

from __future__ import annotations


class EstimateError(ValueError):
    """Failure scoped to a single user action (one calculation or one vendor)."""


class InputValidationError(EstimateError):
    """Raw input from the form/prompt is empty, non-numeric or out of range."""


class InvalidDimensionsError(EstimateError):
    """Non-positive dimensions or negative wastage reached the calculator."""


class RollWidthRequiredError(EstimateError):
    """Area-based price given without a positive roll width."""

    def __init__(self, message: str = "Roll width is required for area-based pricing") -> None:
        super().__init__(message)
