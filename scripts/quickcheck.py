"""Quick runtime checks for the wall covering estimator.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
from core.calculator import calculate_estimate
from core.coverage import compute_coverage
from core.models import EstimateRequest, SortMode, Vendor, WallCoveringInputs
from core.pricing_units import PricingUnit
from core.units import LengthUnit


def approx(a, b, tol=1e-6):
    return abs(a - b) <= tol


def main():
    inputs = WallCoveringInputs(
        roll_width=2,
        roll_width_unit=LengthUnit.FEET,
        wall_length=12,
        wall_length_unit=LengthUnit.FEET,
        wall_height=8,
        wall_height_unit=LengthUnit.FEET,
        wastage_percent=10,
    )

    res = compute_coverage(inputs, LengthUnit.YARDS)

    assert approx(res.wall_area, 96.0)
    assert approx(res.total_area_with_wastage, 105.6)
    assert approx(res.linear_length, 17.6)
    assert approx(res.in_unit(LengthUnit.FEET).linear_length, 52.8)

    vendor = Vendor(
        id="vendor_quickcheck",
        name="Quickcheck Supply",
        price=50,
        price_unit=PricingUnit.PER_ROLL,
        roll_length=5,
        roll_length_unit=LengthUnit.YARDS,
    )
    req = EstimateRequest(**inputs.model_dump(), sort_mode=SortMode.BEST_PRICE)
    best = calculate_estimate(req, [vendor]).comparison.best

    assert best is not None
    assert best.rolls_to_buy == 4
    assert approx(best.total_length, 20.0)
    assert approx(best.wastage, 2.4)
    assert approx(best.total_cost, 200.0)

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
