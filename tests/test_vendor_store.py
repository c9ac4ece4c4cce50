"""
Vendor store: CRUD over one serialized collection, pluggable backends,
silent fallback on malformed stored data, bad records kept on write.
"""

import json

import pytest
from pydantic import ValidationError

from core.models import VendorCreate, VendorUpdate
from core.pricing_units import PricingUnit
from core.units import LengthUnit
from core.vendor_store import (
    STORAGE_KEY,
    InMemoryStore,
    JsonFileStore,
    VendorRepository,
    generate_vendor_id,
)


def test_empty_store_lists_nothing(repo):
    assert repo.list_vendors() == []


def test_create_assigns_id_and_persists(repo, store, sample_fields):
    vendor = repo.create_vendor(sample_fields)
    assert vendor.id.startswith("vendor_")
    assert vendor.name == "Acme Wallcoverings"
    assert repo.list_vendors() == [vendor]

    stored = json.loads(store.get(STORAGE_KEY))
    assert stored == [
        {
            "name": "Acme Wallcoverings",
            "price": 50.0,
            "priceUnit": "per-roll",
            "rollLength": 5.0,
            "rollLengthUnit": "yards",
            "id": vendor.id,
        }
    ]


def test_insertion_order_kept(repo, sample_fields):
    first = repo.create_vendor(sample_fields)
    second = repo.create_vendor(sample_fields.model_copy(update={"name": "Second"}))
    assert [v.id for v in repo.list_vendors()] == [first.id, second.id]


def test_ids_are_unique_even_if_factory_repeats(store, sample_fields):
    ids = iter(["vendor_x", "vendor_x", "vendor_y"])
    repo = VendorRepository(store, id_factory=lambda: next(ids))
    a = repo.create_vendor(sample_fields)
    b = repo.create_vendor(sample_fields)
    assert (a.id, b.id) == ("vendor_x", "vendor_y")


def test_generated_id_format():
    a, b = generate_vendor_id(), generate_vendor_id()
    assert a.startswith("vendor_")
    assert a != b


def test_update_merges_partial_fields(repo, sample_fields):
    vendor = repo.create_vendor(sample_fields)
    assert repo.update_vendor(vendor.id, VendorUpdate(price=42.5, price_unit=PricingUnit.PER_YARD)) is True

    updated = repo.get_vendor(vendor.id)
    assert updated.price == 42.5
    assert updated.price_unit is PricingUnit.PER_YARD
    assert updated.name == vendor.name
    assert updated.roll_length == vendor.roll_length


def test_update_accepts_camel_case_fields(repo, sample_fields):
    vendor = repo.create_vendor(sample_fields)
    repo.update_vendor(vendor.id, VendorUpdate.model_validate({"rollLength": 8, "rollLengthUnit": "meters"}))
    updated = repo.get_vendor(vendor.id)
    assert updated.roll_length == 8
    assert updated.roll_length_unit is LengthUnit.METERS


def test_update_unknown_id(repo, sample_fields):
    repo.create_vendor(sample_fields)
    assert repo.update_vendor("vendor_missing", VendorUpdate(price=1)) is False


def test_delete(repo, sample_fields):
    vendor = repo.create_vendor(sample_fields)
    assert repo.delete_vendor(vendor.id) is True
    assert repo.list_vendors() == []
    assert repo.delete_vendor(vendor.id) is False


def test_vendor_validation():
    with pytest.raises(ValidationError):
        VendorCreate(name="  ", price=10, roll_length=5)
    with pytest.raises(ValidationError):
        VendorCreate(name="X", price=0, roll_length=5)
    with pytest.raises(ValidationError):
        VendorCreate(name="X", price=10, roll_length=-1)
    with pytest.raises(ValidationError):
        VendorUpdate(price=-3)


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        '{"name": "object, not array"}',
        '[{"id": "v1", "name": "No price"}]',
        '[{"id": "v1", "name": "X", "price": 5, "priceUnit": "per-bucket", "rollLength": 5, "rollLengthUnit": "yards"}]',
    ],
)
def test_malformed_storage_is_treated_as_empty(raw):
    repo = VendorRepository(InMemoryStore({STORAGE_KEY: raw}))
    assert repo.list_vendors() == []


def test_malformed_storage_logs_warning(caplog):
    repo = VendorRepository(InMemoryStore({STORAGE_KEY: "{{{"}))
    with caplog.at_level("WARNING", logger="core.vendor_store"):
        repo.list_vendors()
    assert "Error loading vendors" in caplog.text


def test_create_over_malformed_storage_starts_fresh(sample_fields):
    store = InMemoryStore({STORAGE_KEY: "garbage"})
    repo = VendorRepository(store)
    vendor = repo.create_vendor(sample_fields)
    assert repo.list_vendors() == [vendor]


def test_custom_key(store, sample_fields):
    repo = VendorRepository(store, key="other_key")
    repo.create_vendor(sample_fields)
    assert store.get(STORAGE_KEY) is None
    assert store.get("other_key") is not None


# --- JSON file backend ---

def test_json_file_store_round_trip(tmp_path, sample_fields):
    path = tmp_path / "nested" / "vendors.json"
    repo = VendorRepository(JsonFileStore(path))
    vendor = repo.create_vendor(sample_fields)

    assert path.exists()
    assert not path.with_name("vendors.json.tmp").exists()

    # свіжий репозиторій читає той самий файл
    reopened = VendorRepository(JsonFileStore(path))
    assert reopened.list_vendors() == [vendor]


def test_json_file_store_missing_file(tmp_path):
    assert JsonFileStore(tmp_path / "nope.json").get(STORAGE_KEY) is None


def test_json_file_store_corrupt_file(tmp_path, sample_fields):
    path = tmp_path / "vendors.json"
    path.write_text("[1, 2", encoding="utf-8")

    repo = VendorRepository(JsonFileStore(path))
    assert repo.list_vendors() == []

    vendor = repo.create_vendor(sample_fields)
    assert VendorRepository(JsonFileStore(path)).list_vendors() == [vendor]


# --- a bad record among good ones ---

def _record(vendor_id, name, roll_length=5):
    return {
        "id": vendor_id,
        "name": name,
        "price": 50,
        "priceUnit": "per-roll",
        "rollLength": roll_length,
        "rollLengthUnit": "yards",
    }


def _mixed_store():
    records = [_record(f"v{i}", f"Vendor {i}") for i in range(1, 5)]
    records.insert(2, _record("v_bad", "Hand edited", roll_length=0))
    return InMemoryStore({STORAGE_KEY: json.dumps(records)})


def test_invalid_record_hides_only_itself(caplog):
    repo = VendorRepository(_mixed_store())
    with caplog.at_level("WARNING", logger="core.vendor_store"):
        vendors = repo.list_vendors()
    assert [v.id for v in vendors] == ["v1", "v2", "v3", "v4"]
    assert "Skipping invalid vendor record v_bad" in caplog.text


def test_writes_keep_valid_and_invalid_records(sample_fields):
    store = _mixed_store()
    repo = VendorRepository(store)

    new = repo.create_vendor(sample_fields)
    assert [v.id for v in repo.list_vendors()] == ["v1", "v2", "v3", "v4", new.id]

    assert repo.delete_vendor("v1") is True
    assert repo.update_vendor("v2", VendorUpdate(price=70)) is True

    stored = json.loads(store.get(STORAGE_KEY))
    assert [r["id"] for r in stored] == ["v2", "v3", "v4", new.id, "v_bad"]
    assert stored[0]["price"] == 70
    assert stored[-1] == _record("v_bad", "Hand edited", roll_length=0)


def test_new_id_avoids_rejected_records(sample_fields):
    ids = iter(["v_bad", "vendor_ok"])
    repo = VendorRepository(_mixed_store(), id_factory=lambda: next(ids))
    assert repo.create_vendor(sample_fields).id == "vendor_ok"
