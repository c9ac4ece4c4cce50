# cli/app.py
# CLI = тимчасовий UI. Його можна замінити на Web/iOS, не чіпаючи core.

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from core.calculator import calculate_estimate, quick_estimate
from core.config import resolve_path, settings
from core.errors import EstimateError
from core.inputs import parse_optional_price, parse_positive, parse_wastage
from core.models import (
    EstimateRequest,
    EstimateResult,
    QuickEstimateRequest,
    SortMode,
    Vendor,
    VendorCreate,
    VendorUpdate,
    WallCoveringInputs,
)
from core.pricing import format_currency, format_wastage_percent
from core.pricing_units import (
    DEFAULT_PRICING_UNIT,
    DEFAULT_QUICK_ENTRY_PRICE_UNIT,
    QUICK_ENTRY_PRICE_UNITS,
    PricingUnit,
)
from core.units import (
    AREA_UNIT_ABBREVIATIONS,
    DEFAULT_ROLL_WIDTH_UNIT,
    DEFAULT_WALL_DIMENSION_UNIT,
    OUTPUT_UNITS,
    ROLL_WIDTH_UNITS,
    UNIT_ABBREVIATIONS,
    WALL_DIMENSION_UNITS,
    AreaUnit,
    LengthUnit,
)
from core.vendor_store import JsonFileStore, VendorRepository

T = TypeVar("T")


# ---------- ДОПОМІЖНІ ФУНКЦІЇ ВВОДУ ----------

def ask_positive(prompt: str, label: str) -> float:
    """Ввід числа > 0: питаємо, поки не введуть нормальне значення."""
    while True:
        try:
            return parse_positive(input(prompt), label)
        except EstimateError as e:
            print(f"❌ {e}")


def ask_wastage(prompt: str) -> float:
    """Enter -> 0%."""
    while True:
        try:
            return parse_wastage(input(f"{prompt} [0]: "))
        except EstimateError as e:
            print(f"❌ {e}")


def ask_optional_price(prompt: str) -> Optional[float]:
    while True:
        try:
            return parse_optional_price(input(f"{prompt} (Enter to skip): "))
        except EstimateError as e:
            print(f"❌ {e}")


def ask_choice(prompt: str, options: Sequence[T], default: T) -> T:
    """Вибір зі списку: номер або саме значення. Enter -> default."""
    values = [getattr(o, "value", o) for o in options]
    listing = ", ".join(f"{i}) {v}" for i, v in enumerate(values, start=1))
    default_value = getattr(default, "value", default)

    while True:
        raw = input(f"{prompt} [{listing}] [{default_value}]: ").strip().lower()
        if raw == "":
            return default
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        if raw in values:
            return options[values.index(raw)]
        print("❌ Choose one of the listed options")


def ask_length(label: str, units: Sequence[LengthUnit], default_unit: LengthUnit) -> tuple[float, LengthUnit]:
    value = ask_positive(f"{label}: ", label.lower())
    unit = ask_choice(f"{label} unit", units, default_unit)
    return value, unit


def ask_yes_no(prompt: str) -> bool:
    """Безпечний ввід так/ні: повертає True або False."""
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


def money(x: float) -> str:
    return format_currency(x)


# ---------- ВИВІД ----------

def print_estimate(result: EstimateResult) -> None:
    coverage = result.coverage
    abbr = UNIT_ABBREVIATIONS[coverage.unit]

    print("\n--- Result ---")
    print(f"Linear length:         {coverage.linear_length:,.2f} {abbr}")
    print(f"Wall area:             {coverage.wall_area:,.2f} sq ft")
    for area_unit in (AreaUnit.SQ_YARD, AreaUnit.SQ_METER):
        print(f"                       {coverage.area_in(area_unit):,.2f} {AREA_UNIT_ABBREVIATIONS[area_unit]}")
    print(f"With wastage:          {coverage.total_area_with_wastage:,.2f} sq ft")


def print_comparison(result: EstimateResult) -> None:
    comparison = result.comparison

    if not comparison.ranked:
        print("\nNo vendor pricing available. Add vendors to see pricing comparisons.")
    else:
        badge = "BEST PRICE" if comparison.sort_mode is SortMode.BEST_PRICE else "MIN WASTAGE"
        subtitle = (
            "Sorted by lowest total cost"
            if comparison.sort_mode is SortMode.BEST_PRICE
            else "Sorted by minimum material wastage"
        )
        print(f"\n--- Vendor Pricing Comparison ({subtitle}) ---")

        for i, p in enumerate(comparison.ranked):
            mark = f"  <- {badge}" if i == 0 else ""
            v = p.vendor
            print(f"{v.name}: {money(p.total_cost)}{mark}")
            print(f"   Rolls to buy:  {p.rolls_to_buy} ({v.roll_length:g} {UNIT_ABBREVIATIONS[v.roll_length_unit]} each)")
            print(f"   Total length:  {p.total_length:,.2f} yd")
            print(f"   Wastage:       {p.wastage:,.2f} yd ({format_wastage_percent(p.wastage, p.total_length)})")
            print(f"   Price/roll:    {money(p.price_per_roll)}")

        print("* Total cost = Rolls to buy × Price per roll")

    if result.notes:
        print("\nNotes:")
        for n in result.notes:
            print(f" - {n}")


def print_vendors(vendors: Sequence[Vendor]) -> None:
    if not vendors:
        print("\n(no vendors saved)")
        return
    print("\nSaved vendors:")
    for i, v in enumerate(vendors, start=1):
        print(
            f" {i}) {v.name}: {money(v.price)}{v.price_unit.short_label}, "
            f"roll {v.roll_length:g} {UNIT_ABBREVIATIONS[v.roll_length_unit]}"
        )


# ---------- ПОСТАЧАЛЬНИКИ ----------

def ask_vendor_fields() -> VendorCreate:
    while True:
        name = input("Vendor name: ").strip()
        if name:
            break
        print("❌ Please enter vendor name")

    price = ask_positive("Price: ", "price")
    price_unit = ask_choice("Price unit", list(PricingUnit), DEFAULT_PRICING_UNIT)
    roll_length = ask_positive("Roll length: ", "roll length")
    roll_length_unit = ask_choice("Roll length unit", ROLL_WIDTH_UNITS, LengthUnit.YARDS)

    return VendorCreate(
        name=name,
        price=price,
        price_unit=price_unit,
        roll_length=roll_length,
        roll_length_unit=roll_length_unit,
    )


def pick_vendor(repo: VendorRepository) -> Optional[Vendor]:
    vendors = repo.list_vendors()
    print_vendors(vendors)
    if not vendors:
        return None
    raw = input("Vendor number: ").strip()
    if raw.isdigit() and 1 <= int(raw) <= len(vendors):
        return vendors[int(raw) - 1]
    print("❌ Unknown vendor")
    return None


def manage_vendors(repo: VendorRepository) -> None:
    """Меню: список / додати / редагувати / видалити."""
    while True:
        action = ask_choice("\nVendors", ["list", "add", "edit", "delete", "done"], "done")

        if action == "done":
            return

        if action == "list":
            print_vendors(repo.list_vendors())

        elif action == "add":
            vendor = repo.create_vendor(ask_vendor_fields())
            print(f"✅ Added {vendor.name}")

        elif action == "edit":
            vendor = pick_vendor(repo)
            if vendor is None:
                continue
            print("Enter the new values:")
            fields = ask_vendor_fields()
            repo.update_vendor(vendor.id, VendorUpdate(**fields.model_dump()))
            print(f"✅ Updated {fields.name}")

        elif action == "delete":
            vendor = pick_vendor(repo)
            if vendor is None:
                continue
            if ask_yes_no(f"Delete {vendor.name}?"):
                repo.delete_vendor(vendor.id)
                print(f"✅ Deleted {vendor.name}")


# ---------- ОСНОВНИЙ CLI СЦЕНАРІЙ ----------

def run_cli(repo: Optional[VendorRepository] = None) -> None:
    print("\n=== Wall Covering Estimator (CLI) ===\n")

    if repo is None:
        repo = VendorRepository(JsonFileStore(resolve_path(settings.VENDOR_STORE_PATH)))

    # --- Рулон ---
    roll_width, roll_width_unit = ask_length("Roll width", ROLL_WIDTH_UNITS, DEFAULT_ROLL_WIDTH_UNIT)
    roll_size, roll_size_unit = ask_length("Roll/bolt size", ROLL_WIDTH_UNITS, LengthUnit.YARDS)

    # --- Стіна ---
    wall_length, wall_length_unit = ask_length("Wall length", WALL_DIMENSION_UNITS, DEFAULT_WALL_DIMENSION_UNIT)
    wall_height, wall_height_unit = ask_length("Wall height", WALL_DIMENSION_UNITS, DEFAULT_WALL_DIMENSION_UNIT)

    wastage = ask_wastage("Wastage %")

    # --- Ціна (необовʼязково) ---
    vendor_price = ask_optional_price("Vendor price")
    quick_unit = PricingUnit.PER_YARD
    if vendor_price is not None:
        quick_key = ask_choice("Price unit", list(QUICK_ENTRY_PRICE_UNITS), DEFAULT_QUICK_ENTRY_PRICE_UNIT)
        quick_unit = PricingUnit.parse(quick_key)

    quick_req = QuickEstimateRequest(
        roll_width=roll_width,
        roll_width_unit=roll_width_unit,
        wall_length=wall_length,
        wall_length_unit=wall_length_unit,
        wall_height=wall_height,
        wall_height_unit=wall_height_unit,
        wastage_percent=wastage,
        roll_size=roll_size,
        roll_size_unit=roll_size_unit,
        vendor_price=vendor_price,
        price_unit=quick_unit,
    )

    try:
        quick = quick_estimate(quick_req)
    except EstimateError as e:
        print(f"❌ Calculation error: {e}")
        return

    print("\n--- Breakdown ---")
    print(f"Quantity w/ wastage:   {quick.quantity_with_wastage:,.2f} yd")
    print(f"Roll size:             {quick.roll_size:,.2f} yd")
    print(f"Rolls to buy:          {quick.number_of_rolls}")
    print(f"Total quantity:        {quick.total_quantity:,.2f} yd")
    if quick.total_cost is not None:
        print(f"Price per yard:        {money(quick.price_per_linear_yard)}")
        print(f"TOTAL:                 {money(quick.total_cost)}")

    # --- Порівняння постачальників ---
    if ask_yes_no("\nManage saved vendors?"):
        manage_vendors(repo)

    sort_mode = ask_choice("Sort vendors by", list(SortMode), SortMode.BEST_PRICE)

    req = EstimateRequest(
        **quick_req.model_dump(include=set(WallCoveringInputs.model_fields)),
        output_unit=LengthUnit.YARDS,
        sort_mode=sort_mode,
    )

    try:
        result = calculate_estimate(req, repo.list_vendors())
    except EstimateError as e:
        print(f"❌ Calculation error: {e}")
        return

    print_estimate(result)
    print_comparison(result)

    # --- Інша одиниця для довжини (yards / feet / meters) ---
    while ask_yes_no("\nShow linear length in another unit?"):
        unit = ask_choice("Output unit", OUTPUT_UNITS, LengthUnit.FEET)
        shown = result.coverage.in_unit(unit)
        print(f"Linear length:         {shown.linear_length:,.2f} {UNIT_ABBREVIATIONS[unit]}")

