# core/coverage.py
# Скільки погонного матеріалу треба на стіну.

from __future__ import annotations

import logging

from .errors import InvalidDimensionsError
from .models import WallCoveringInputs, WallCoveringResult
from .rules import effective_area
from .units import DEFAULT_OUTPUT_UNIT, LengthUnit, from_feet, to_feet

logger = logging.getLogger(__name__)


def compute_coverage(
    inputs: WallCoveringInputs,
    output_unit: LengthUnit | str = DEFAULT_OUTPUT_UNIT,
) -> WallCoveringResult:
    """
    Linear length of material needed to cover the wall.

    1. all dimensions -> feet
    2. wall area = length * height (sq ft)
    3. area with wastage = area * (1 + wastage/100)
    4. linear length = area with wastage / roll width
    5. linear length -> output_unit
    """
    output_unit = LengthUnit(output_unit)

    roll_width_ft = to_feet(inputs.roll_width, inputs.roll_width_unit)
    wall_length_ft = to_feet(inputs.wall_length, inputs.wall_length_unit)
    wall_height_ft = to_feet(inputs.wall_height, inputs.wall_height_unit)

    if roll_width_ft <= 0 or wall_length_ft <= 0 or wall_height_ft <= 0:
        raise InvalidDimensionsError("All dimensions must be greater than zero")
    if inputs.wastage_percent < 0:
        raise InvalidDimensionsError("Wastage percentage cannot be negative")

    wall_area = wall_length_ft * wall_height_ft
    total_area = effective_area(wall_area, inputs.wastage_percent)

    linear_length_ft = total_area / roll_width_ft

    logger.debug(
        "coverage: area=%.4f sqft, with wastage=%.4f sqft, roll width=%.4f ft -> %.4f ft",
        wall_area,
        total_area,
        roll_width_ft,
        linear_length_ft,
    )

    return WallCoveringResult(
        linear_length=from_feet(linear_length_ft, output_unit),
        unit=output_unit,
        wall_area=wall_area,
        total_area_with_wastage=total_area,
        linear_length_feet=linear_length_ft,
    )
