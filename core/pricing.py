# core/pricing.py
# Порівняння постачальників: скільки рулонів, скільки залишку, скільки грошей.

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .errors import EstimateError, InvalidDimensionsError, RollWidthRequiredError
from .models import PricingComparison, PricingFailure, SortMode, Vendor, VendorPricing
from .pricing_units import AREA_TO_SQ_YARD, LINEAR_TO_PER_YARD, PricingFamily, PricingUnit
from .rules import leftover_length, rolls_to_buy
from .units import to_yards

logger = logging.getLogger(__name__)


def price_per_roll(
    price: float,
    price_unit: PricingUnit | str,
    roll_length_yards: float,
    roll_width_yards: Optional[float] = None,
) -> float:
    """
    Normalize a vendor price to price per roll.

    per-roll: as is
    linear:   price per yard * roll length
    area:     price per sq yard * (roll length * roll width)
    """
    unit = PricingUnit(price_unit)

    match unit.family:
        case PricingFamily.ROLL:
            return price
        case PricingFamily.LINEAR:
            return price * LINEAR_TO_PER_YARD[unit] * roll_length_yards
        case PricingFamily.AREA:
            if not roll_width_yards or roll_width_yards <= 0:
                raise RollWidthRequiredError()
            return price * AREA_TO_SQ_YARD[unit] * (roll_length_yards * roll_width_yards)

    raise ValueError(f"Unknown pricing unit: {price_unit}")


def price_one_vendor(
    vendor: Vendor,
    required_linear_yards: float,
    roll_width_yards: Optional[float],
) -> VendorPricing:
    roll_length_yards = to_yards(vendor.roll_length, vendor.roll_length_unit)
    if roll_length_yards <= 0:
        raise InvalidDimensionsError("Roll length must be greater than zero")

    rolls_needed = required_linear_yards / roll_length_yards
    rolls = rolls_to_buy(required_linear_yards, roll_length_yards)

    total_length = rolls * roll_length_yards
    wastage = leftover_length(rolls, roll_length_yards, required_linear_yards)

    per_roll = price_per_roll(vendor.price, vendor.price_unit, roll_length_yards, roll_width_yards)

    return VendorPricing(
        vendor=vendor,
        rolls_needed=rolls_needed,
        rolls_to_buy=rolls,
        total_length=total_length,
        wastage=wastage,
        total_cost=rolls * per_roll,
        price_per_roll=per_roll,
    )


def price_all_vendors(
    vendors: Iterable[Vendor],
    required_linear_yards: float,
    roll_width_yards: Optional[float],
    *,
    sort_mode: SortMode | str,
) -> PricingComparison:
    """
    Price every vendor and rank them.

    One misconfigured vendor never hides the rest: its error lands in
    `skipped` and the batch continues. Ties keep the input order.
    """
    sort_mode = SortMode(sort_mode)

    ranked: list[VendorPricing] = []
    skipped: list[PricingFailure] = []

    for vendor in vendors:
        try:
            ranked.append(price_one_vendor(vendor, required_linear_yards, roll_width_yards))
        except EstimateError as e:
            logger.warning("Skipping vendor %s (%s): %s", vendor.id, vendor.name, e)
            skipped.append(PricingFailure(vendor=vendor, reason=str(e)))

    if sort_mode is SortMode.BEST_PRICE:
        ranked.sort(key=lambda p: p.total_cost)
    else:
        ranked.sort(key=lambda p: p.wastage)

    return PricingComparison(
        sort_mode=sort_mode,
        required_linear_yards=required_linear_yards,
        ranked=ranked,
        skipped=skipped,
    )


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_wastage_percent(wastage: float, total_length: float) -> str:
    if total_length == 0:
        return "0%"
    return f"{wastage / total_length * 100:.1f}%"
