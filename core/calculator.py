from __future__ import annotations

import logging
from typing import Sequence

from .coverage import compute_coverage
from .errors import InvalidDimensionsError
from .models import (
    EstimateRequest,
    EstimateResult,
    QuickEstimateRequest,
    QuickEstimateResult,
    SortMode,
    Vendor,
)
from .pricing import format_currency, price_all_vendors, price_per_roll
from .rules import rolls_to_buy
from .units import LengthUnit, from_feet, to_yards

logger = logging.getLogger(__name__)


def calculate_estimate(req: EstimateRequest, vendors: Sequence[Vendor]) -> EstimateResult:
    """Coverage -> required yards -> vendor comparison, in one call."""
    notes: list[str] = []

    coverage = compute_coverage(req, req.output_unit)

    # порівняння постачальників завжди в ярдах
    required_yards = from_feet(coverage.linear_length_feet, LengthUnit.YARDS)
    roll_width_yards = to_yards(req.roll_width, req.roll_width_unit)

    comparison = price_all_vendors(vendors, required_yards, roll_width_yards, sort_mode=req.sort_mode)

    if not vendors:
        notes.append("No vendors saved. Add vendors to compare pricing.")
    for failure in comparison.skipped:
        notes.append(f"Vendor '{failure.vendor.name}' skipped: {failure.reason}")

    best = comparison.best
    if best is not None:
        if req.sort_mode is SortMode.BEST_PRICE:
            notes.append(f"Best price: {best.vendor.name} ({format_currency(best.total_cost)}).")
        else:
            notes.append(f"Min wastage: {best.vendor.name} ({best.wastage:.2f} yd).")

    logger.info(
        "Estimate: %.2f yd required, %d vendor(s) ranked, %d skipped",
        required_yards,
        len(comparison.ranked),
        len(comparison.skipped),
    )

    return EstimateResult(coverage=coverage, comparison=comparison, notes=notes)


def quick_estimate(req: QuickEstimateRequest) -> QuickEstimateResult:
    """Single roll size, optional single price. Roll count and cost in yards."""
    coverage = compute_coverage(req, LengthUnit.YARDS)
    quantity = coverage.linear_length

    roll_size_yards = to_yards(req.roll_size, req.roll_size_unit)
    if roll_size_yards <= 0:
        raise InvalidDimensionsError("Roll size must be greater than zero")

    rolls = rolls_to_buy(quantity, roll_size_yards)
    total_quantity = rolls * roll_size_yards

    result = QuickEstimateResult(
        quantity_with_wastage=quantity,
        roll_size=roll_size_yards,
        number_of_rolls=rolls,
        total_quantity=total_quantity,
    )

    if req.vendor_price is not None and req.vendor_price > 0:
        roll_width_yards = to_yards(req.roll_width, req.roll_width_unit)
        per_roll = price_per_roll(req.vendor_price, req.price_unit, roll_size_yards, roll_width_yards)
        result = result.model_copy(
            update={
                "price_per_roll": per_roll,
                "price_per_linear_yard": per_roll / roll_size_yards,
                "total_cost": rolls * per_roll,
            }
        )

    return result
