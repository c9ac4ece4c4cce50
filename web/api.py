from __future__ import annotations

from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from core.calculator import calculate_estimate, quick_estimate
from core.config import resolve_path, settings
from core.coverage import compute_coverage
from core.errors import EstimateError
from core.models import (
    EstimateRequest,
    EstimateResult,
    PricingComparison,
    QuickEstimateRequest,
    QuickEstimateResult,
    SortMode,
    Vendor,
    VendorCreate,
    VendorUpdate,
    WallCoveringInputs,
    WallCoveringResult,
)
from core.pricing import price_all_vendors
from core.pricing_units import PricingUnit
from core.units import (
    OUTPUT_UNITS,
    ROLL_WIDTH_UNITS,
    UNIT_LABELS,
    WALL_DIMENSION_UNITS,
    LengthUnit,
)
from core.vendor_store import JsonFileStore, VendorRepository

app = FastAPI(title="Wall Covering Estimator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


_repository: Optional[VendorRepository] = None


def get_repository() -> VendorRepository:
    """Один репозиторій на процес, файл з налаштувань. Тести підміняють через dependency_overrides."""
    global _repository
    if _repository is None:
        _repository = VendorRepository(JsonFileStore(resolve_path(settings.VENDOR_STORE_PATH)))
    return _repository


# ---- Request models: тут валідація вводу (gt=0 / ge=0), core перевіряє ще раз ----

class WallCoveringRequest(WallCoveringInputs):
    roll_width: float = Field(gt=0)
    wall_length: float = Field(gt=0)
    wall_height: float = Field(gt=0)
    wastage_percent: float = Field(default=0, ge=0)


class EstimateBody(EstimateRequest):
    roll_width: float = Field(gt=0)
    wall_length: float = Field(gt=0)
    wall_height: float = Field(gt=0)
    wastage_percent: float = Field(default=0, ge=0)


class QuickEstimateBody(QuickEstimateRequest):
    roll_width: float = Field(gt=0)
    wall_length: float = Field(gt=0)
    wall_height: float = Field(gt=0)
    wastage_percent: float = Field(default=0, ge=0)
    roll_size: float = Field(gt=0)
    vendor_price: Optional[float] = Field(default=None, gt=0)


class PricingRequest(BaseModel):
    required_linear_yards: float = Field(gt=0)
    roll_width_yards: Optional[float] = Field(default=None, ge=0)
    sort_mode: SortMode


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/units")
def units() -> dict[str, Any]:
    """Списки для випадаючих меню UI."""
    return {
        "roll_width_units": [u.value for u in ROLL_WIDTH_UNITS],
        "wall_dimension_units": [u.value for u in WALL_DIMENSION_UNITS],
        "output_units": [u.value for u in OUTPUT_UNITS],
        "length_unit_labels": {u.value: label for u, label in UNIT_LABELS.items()},
        "pricing_units": [
            {"value": p.value, "label": p.label, "short_label": p.short_label, "family": p.family.value}
            for p in PricingUnit
        ],
        "sort_modes": [m.value for m in SortMode],
    }


@app.post("/coverage", response_model=WallCoveringResult)
def coverage(
    output_unit: LengthUnit = LengthUnit.YARDS,
    req: WallCoveringRequest = Body(...),
) -> WallCoveringResult:
    try:
        return compute_coverage(req, output_unit)
    except EstimateError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/estimate", response_model=EstimateResult)
def estimate(
    req: EstimateBody = Body(...),
    repo: VendorRepository = Depends(get_repository),
) -> EstimateResult:
    """Основний endpoint: площа -> погонна довжина -> порівняння збережених постачальників."""
    try:
        return calculate_estimate(req, repo.list_vendors())
    except EstimateError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/quick-estimate", response_model=QuickEstimateResult)
def quick(req: QuickEstimateBody = Body(...)) -> QuickEstimateResult:
    try:
        return quick_estimate(req)
    except EstimateError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/pricing", response_model=PricingComparison)
def pricing(
    req: PricingRequest = Body(...),
    repo: VendorRepository = Depends(get_repository),
) -> PricingComparison:
    return price_all_vendors(
        repo.list_vendors(),
        req.required_linear_yards,
        req.roll_width_yards,
        sort_mode=req.sort_mode,
    )


# ---- Vendors CRUD ----

@app.get("/vendors", response_model=list[Vendor])
def list_vendors(repo: VendorRepository = Depends(get_repository)) -> list[Vendor]:
    return repo.list_vendors()


@app.post("/vendors", response_model=Vendor, status_code=status.HTTP_201_CREATED)
def create_vendor(
    fields: VendorCreate = Body(...),
    repo: VendorRepository = Depends(get_repository),
) -> Vendor:
    return repo.create_vendor(fields)


@app.patch("/vendors/{vendor_id}", response_model=Vendor)
def update_vendor(
    vendor_id: str,
    updates: VendorUpdate = Body(...),
    repo: VendorRepository = Depends(get_repository),
) -> Vendor:
    try:
        found = repo.update_vendor(vendor_id, updates)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid vendor: {e}")
    if not found:
        raise HTTPException(status_code=404, detail="Vendor not found")
    return repo.get_vendor(vendor_id)


@app.delete("/vendors/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vendor(vendor_id: str, repo: VendorRepository = Depends(get_repository)) -> Response:
    if not repo.delete_vendor(vendor_id):
        raise HTTPException(status_code=404, detail="Vendor not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
