# core/rules.py
# Правила площі та рулонів (waste, округлення вгору).

from __future__ import annotations

import math


def effective_area(area_sqft: float, waste_pct: float) -> float:
    """Площа для матеріалів = area * (1 + waste%)."""
    return area_sqft * (1 + waste_pct / 100.0)


def rolls_to_buy(required_length: float, roll_length: float) -> int:
    """Половину рулону не купиш, тому завжди округлюємо вгору."""
    return math.ceil(required_length / roll_length)


def leftover_length(rolls: int, roll_length: float, required_length: float) -> float:
    """Скільки матеріалу залишиться після покупки `rolls` рулонів. Ніколи не менше нуля."""
    # похибка float дає -1e-16 там, де залишок рівно нуль
    return max(0.0, rolls * roll_length - required_length)
