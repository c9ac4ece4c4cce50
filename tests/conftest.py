"""
Shared test fixtures: in-memory vendor repository, API test client, sample vendors.
"""

import pytest
from fastapi.testclient import TestClient

from core.models import Vendor, VendorCreate
from core.pricing_units import PricingUnit
from core.units import LengthUnit
from core.vendor_store import InMemoryStore, VendorRepository
from web.api import app, get_repository


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def repo(store):
    """Repository over a fresh in-memory store."""
    return VendorRepository(store)


@pytest.fixture
def client(repo):
    """FastAPI test client wired to the in-memory repository."""
    app.dependency_overrides[get_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_vendor(
    vendor_id="vendor_1",
    name="Acme Wallcoverings",
    price=50.0,
    price_unit=PricingUnit.PER_ROLL,
    roll_length=5.0,
    roll_length_unit=LengthUnit.YARDS,
) -> Vendor:
    return Vendor(
        id=vendor_id,
        name=name,
        price=price,
        price_unit=price_unit,
        roll_length=roll_length,
        roll_length_unit=roll_length_unit,
    )


@pytest.fixture
def sample_fields():
    return VendorCreate(
        name="Acme Wallcoverings",
        price=50,
        price_unit=PricingUnit.PER_ROLL,
        roll_length=5,
        roll_length_unit=LengthUnit.YARDS,
    )
