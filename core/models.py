from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .pricing_units import DEFAULT_PRICING_UNIT, PricingUnit
from .units import (
    DEFAULT_OUTPUT_UNIT,
    DEFAULT_ROLL_WIDTH_UNIT,
    DEFAULT_WALL_DIMENSION_UNIT,
    AreaUnit,
    LengthUnit,
    from_feet,
    from_square_feet,
)


class SortMode(str, Enum):
    BEST_PRICE = "best-price"
    MIN_WASTAGE = "min-wastage"


# ---------- COVERAGE ----------

class WallCoveringInputs(BaseModel):
    # без обмежень тут: compute_coverage сам перевіряє розміри
    model_config = ConfigDict(frozen=True)

    roll_width: float
    roll_width_unit: LengthUnit = DEFAULT_ROLL_WIDTH_UNIT

    wall_length: float
    wall_length_unit: LengthUnit = DEFAULT_WALL_DIMENSION_UNIT

    wall_height: float
    wall_height_unit: LengthUnit = DEFAULT_WALL_DIMENSION_UNIT

    wastage_percent: float = 0


class WallCoveringResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    linear_length: float
    unit: LengthUnit

    # площі завжди в sq ft, незалежно від unit
    wall_area: float
    total_area_with_wastage: float

    linear_length_feet: float

    def in_unit(self, unit: LengthUnit | str) -> "WallCoveringResult":
        """Same result, linear length re-expressed in another output unit."""
        unit = LengthUnit(unit)
        return self.model_copy(
            update={"linear_length": from_feet(self.linear_length_feet, unit), "unit": unit}
        )

    def area_in(self, unit: AreaUnit | str) -> float:
        return from_square_feet(self.wall_area, unit)


# ---------- VENDORS ----------

class VendorCreate(BaseModel):
    # у сховищі поля camelCase: priceUnit, rollLength, rollLengthUnit
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    price_unit: PricingUnit = DEFAULT_PRICING_UNIT
    roll_length: float = Field(gt=0)
    roll_length_unit: LengthUnit = LengthUnit.YARDS


class Vendor(VendorCreate):
    id: str


class VendorUpdate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, gt=0)
    price_unit: Optional[PricingUnit] = None
    roll_length: Optional[float] = Field(default=None, gt=0)
    roll_length_unit: Optional[LengthUnit] = None


# ---------- PRICING ----------

class VendorPricing(BaseModel):
    vendor: Vendor

    rolls_needed: float  # точне значення, потрібне для wastage
    rolls_to_buy: int

    total_length: float  # yards
    wastage: float  # yards
    total_cost: float
    price_per_roll: float

    @computed_field
    @property
    def wastage_percent(self) -> float:
        if self.total_length == 0:
            return 0.0
        return self.wastage / self.total_length * 100


class PricingFailure(BaseModel):
    vendor: Vendor
    reason: str


class PricingComparison(BaseModel):
    sort_mode: SortMode
    required_linear_yards: float

    ranked: list[VendorPricing] = []
    skipped: list[PricingFailure] = []

    @computed_field
    @property
    def best(self) -> Optional[VendorPricing]:
        return self.ranked[0] if self.ranked else None


# ---------- ESTIMATES ----------

class EstimateRequest(WallCoveringInputs):
    output_unit: LengthUnit = DEFAULT_OUTPUT_UNIT
    sort_mode: SortMode


class EstimateResult(BaseModel):
    coverage: WallCoveringResult
    comparison: PricingComparison

    notes: list[str] = []


class QuickEstimateRequest(WallCoveringInputs):
    roll_size: float
    roll_size_unit: LengthUnit = LengthUnit.YARDS

    # ціна необовʼязкова: без неї рахуємо тільки кількість
    vendor_price: Optional[float] = None
    price_unit: PricingUnit = PricingUnit.PER_YARD


class QuickEstimateResult(BaseModel):
    quantity_with_wastage: float  # yards
    roll_size: float  # yards
    number_of_rolls: int
    total_quantity: float  # yards
    unit: LengthUnit = LengthUnit.YARDS

    price_per_roll: Optional[float] = None
    price_per_linear_yard: Optional[float] = None
    total_cost: Optional[float] = None
