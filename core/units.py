# core/units.py
# Одиниці довжини і таблиці конвертації. База для всіх розрахунків: фути.

from __future__ import annotations

from enum import Enum


class LengthUnit(str, Enum):
    INCHES = "inches"
    FEET = "feet"
    YARDS = "yards"
    METERS = "meters"


class AreaUnit(str, Enum):
    SQ_YARD = "sq-yard"
    SQ_FOOT = "sq-foot"
    SQ_METER = "sq-meter"


# unit -> feet
UNIT_TO_FEET: dict[LengthUnit, float] = {
    LengthUnit.INCHES: 1 / 12,
    LengthUnit.FEET: 1,
    LengthUnit.YARDS: 3,
    LengthUnit.METERS: 3.28084,
}

# feet -> unit. Окрема таблиця, не обернена до UNIT_TO_FEET (для метрів 0.3048 != 1/3.28084).
FEET_TO_UNIT: dict[LengthUnit, float] = {
    LengthUnit.INCHES: 12,
    LengthUnit.FEET: 1,
    LengthUnit.YARDS: 1 / 3,
    LengthUnit.METERS: 0.3048,
}

SQ_FEET_TO_AREA_UNIT: dict[AreaUnit, float] = {
    AreaUnit.SQ_YARD: 1 / 9,
    AreaUnit.SQ_FOOT: 1,
    AreaUnit.SQ_METER: 0.092903,
}

UNIT_LABELS: dict[LengthUnit, str] = {
    LengthUnit.INCHES: "Inches",
    LengthUnit.FEET: "Feet",
    LengthUnit.YARDS: "Yards",
    LengthUnit.METERS: "Meters",
}

UNIT_ABBREVIATIONS: dict[LengthUnit, str] = {
    LengthUnit.INCHES: "in",
    LengthUnit.FEET: "ft",
    LengthUnit.YARDS: "yd",
    LengthUnit.METERS: "m",
}

AREA_UNIT_ABBREVIATIONS: dict[AreaUnit, str] = {
    AreaUnit.SQ_YARD: "sq yd",
    AreaUnit.SQ_FOOT: "sq ft",
    AreaUnit.SQ_METER: "sq m",
}

# Дозволені одиниці для різних полів вводу
ROLL_WIDTH_UNITS: list[LengthUnit] = [
    LengthUnit.INCHES,
    LengthUnit.FEET,
    LengthUnit.YARDS,
    LengthUnit.METERS,
]
WALL_DIMENSION_UNITS: list[LengthUnit] = [
    LengthUnit.FEET,
    LengthUnit.INCHES,
    LengthUnit.METERS,
    LengthUnit.YARDS,
]
OUTPUT_UNITS: list[LengthUnit] = [LengthUnit.YARDS, LengthUnit.FEET, LengthUnit.METERS]

DEFAULT_ROLL_WIDTH_UNIT = LengthUnit.INCHES
DEFAULT_WALL_DIMENSION_UNIT = LengthUnit.FEET
DEFAULT_OUTPUT_UNIT = LengthUnit.YARDS


def to_feet(value: float, unit: LengthUnit | str) -> float:
    """Значення в одиницях `unit` -> фути. Валідація на боці викликача."""
    return value * UNIT_TO_FEET[LengthUnit(unit)]


def from_feet(value: float, unit: LengthUnit | str) -> float:
    """Фути -> значення в одиницях `unit`."""
    return value * FEET_TO_UNIT[LengthUnit(unit)]


def convert_length(value: float, from_unit: LengthUnit | str, to_unit: LengthUnit | str) -> float:
    # завжди через фути, як і решта розрахунків
    return from_feet(to_feet(value, from_unit), to_unit)


def to_yards(value: float, unit: LengthUnit | str) -> float:
    return convert_length(value, unit, LengthUnit.YARDS)


def from_square_feet(value: float, unit: AreaUnit | str) -> float:
    return value * SQ_FEET_TO_AREA_UNIT[AreaUnit(unit)]
