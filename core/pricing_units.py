# core/pricing_units.py
# Одиниці ціни постачальника: за рулон, за погонну одиницю, за площу.

from __future__ import annotations

from enum import Enum


class PricingFamily(str, Enum):
    ROLL = "roll"
    LINEAR = "linear"
    AREA = "area"


class PricingUnit(str, Enum):
    PER_ROLL = "per-roll"
    PER_YARD = "per-yard"
    PER_FOOT = "per-foot"
    PER_METER = "per-meter"
    PER_SQ_YARD = "per-sq-yard"
    PER_SQ_FOOT = "per-sq-foot"
    PER_SQ_METER = "per-sq-meter"

    @property
    def family(self) -> PricingFamily:
        match self:
            case PricingUnit.PER_ROLL:
                return PricingFamily.ROLL
            case PricingUnit.PER_YARD | PricingUnit.PER_FOOT | PricingUnit.PER_METER:
                return PricingFamily.LINEAR
            case PricingUnit.PER_SQ_YARD | PricingUnit.PER_SQ_FOOT | PricingUnit.PER_SQ_METER:
                return PricingFamily.AREA
        raise ValueError(f"Unknown pricing unit: {self!r}")

    @property
    def label(self) -> str:
        return PRICING_UNIT_LABELS[self]

    @property
    def short_label(self) -> str:
        return PRICING_UNIT_SHORT_LABELS[self]

    @classmethod
    def parse(cls, raw: str) -> "PricingUnit":
        """Accepts both the canonical tags and the quick-entry form names."""
        key = raw.strip().lower()
        if key in QUICK_ENTRY_PRICE_UNITS:
            return QUICK_ENTRY_PRICE_UNITS[key]
        return cls(key)


# ціна за фут/метр -> ціна за ярд
LINEAR_TO_PER_YARD: dict[PricingUnit, float] = {
    PricingUnit.PER_YARD: 1,
    PricingUnit.PER_FOOT: 3,
    PricingUnit.PER_METER: 1.09361,
}

# ціна за кв. фут/метр -> ціна за кв. ярд
AREA_TO_SQ_YARD: dict[PricingUnit, float] = {
    PricingUnit.PER_SQ_YARD: 1,
    PricingUnit.PER_SQ_FOOT: 9,
    PricingUnit.PER_SQ_METER: 1.19599,
}

PRICING_UNIT_LABELS: dict[PricingUnit, str] = {
    PricingUnit.PER_ROLL: "Per Roll",
    PricingUnit.PER_YARD: "Per Yard",
    PricingUnit.PER_FOOT: "Per Foot",
    PricingUnit.PER_METER: "Per Meter",
    PricingUnit.PER_SQ_YARD: "Per Sq Yard",
    PricingUnit.PER_SQ_FOOT: "Per Sq Foot",
    PricingUnit.PER_SQ_METER: "Per Sq Meter",
}

PRICING_UNIT_SHORT_LABELS: dict[PricingUnit, str] = {
    PricingUnit.PER_ROLL: "/roll",
    PricingUnit.PER_YARD: "/yd",
    PricingUnit.PER_FOOT: "/ft",
    PricingUnit.PER_METER: "/m",
    PricingUnit.PER_SQ_YARD: "/sq yd",
    PricingUnit.PER_SQ_FOOT: "/sq ft",
    PricingUnit.PER_SQ_METER: "/sq m",
}

# Список на формі швидкого розрахунку (одна ціна без збереженого постачальника)
QUICK_ENTRY_PRICE_UNITS: dict[str, PricingUnit] = {
    "per-linear-yard": PricingUnit.PER_YARD,
    "per-linear-foot": PricingUnit.PER_FOOT,
    "per-square-meter": PricingUnit.PER_SQ_METER,
    "per-square-foot": PricingUnit.PER_SQ_FOOT,
    "per-roll": PricingUnit.PER_ROLL,
}

DEFAULT_PRICING_UNIT = PricingUnit.PER_ROLL
DEFAULT_QUICK_ENTRY_PRICE_UNIT = "per-linear-yard"
