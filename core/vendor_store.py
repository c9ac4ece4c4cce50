"""
Vendor Store

All vendors live as one JSON array under a single well-known key in a
key-value backend. The repository is an explicit object: callers build it
with the backend they need (in-memory for tests, a JSON file for the CLI and
the API) and pass it around.

Every write is read-modify-write of the whole collection, serialized by a
lock. Last writer wins.

Unreadable stored data is NOT an error here. If the blob is not a JSON
array, the collection is treated as empty and a warning is logged. If only
some records are invalid, those are dropped from reads and logged, but kept
verbatim on the next write so a bad record never takes the valid ones with it.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import time
import uuid
from pathlib import Path
from typing import Any, Callable, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from .models import Vendor, VendorCreate, VendorUpdate

logger = logging.getLogger(__name__)

STORAGE_KEY = "wall_covering_vendors"

_vendor = TypeAdapter(Vendor)
_vendor_list = TypeAdapter(list[Vendor])


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed store. Used by tests and as a throwaway default."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    One JSON object file: {key: raw string value}.

    Writes go to a temp file first and are then swapped in with os.replace,
    so a crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return raw

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning("Overwriting malformed store file %s", self.path)
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)


def generate_vendor_id() -> str:
    return f"vendor_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class VendorRepository:
    """CRUD over the vendor collection stored under one key."""

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        *,
        key: str = STORAGE_KEY,
        id_factory: Callable[[], str] = generate_vendor_id,
    ) -> None:
        self.store = store if store is not None else InMemoryStore()
        self.key = key
        self._id_factory = id_factory
        self._lock = threading.RLock()

    # ---------- read ----------

    def list_vendors(self) -> list[Vendor]:
        """All valid vendors in insertion order; [] if nothing (valid) is stored."""
        vendors, _ = self._load()
        return vendors

    def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        for vendor in self.list_vendors():
            if vendor.id == vendor_id:
                return vendor
        return None

    # ---------- write ----------

    def create_vendor(self, fields: VendorCreate) -> Vendor:
        with self._lock:
            vendors, rejected = self._load()
            vendor = Vendor(**fields.model_dump(), id=self._new_id(vendors, rejected))
            vendors.append(vendor)
            self._save(vendors, rejected)

        logger.info("Created vendor %s (%s)", vendor.id, vendor.name)
        return vendor

    def update_vendor(self, vendor_id: str, updates: VendorUpdate) -> bool:
        """Merge the fields that were set into the record. False if id not found."""
        with self._lock:
            vendors, rejected = self._load()
            for index, vendor in enumerate(vendors):
                if vendor.id == vendor_id:
                    break
            else:
                return False

            merged = {**vendor.model_dump(), **updates.model_dump(exclude_unset=True, exclude_none=True)}
            vendors[index] = Vendor.model_validate(merged)
            self._save(vendors, rejected)

        logger.info("Updated vendor %s", vendor_id)
        return True

    def delete_vendor(self, vendor_id: str) -> bool:
        with self._lock:
            vendors, rejected = self._load()
            remaining = [v for v in vendors if v.id != vendor_id]
            if len(remaining) == len(vendors):
                return False
            self._save(remaining, rejected)

        logger.info("Deleted vendor %s", vendor_id)
        return True

    # ---------- internals ----------

    def _load(self) -> tuple[list[Vendor], list[Any]]:
        """Valid vendors, plus the raw entries that failed validation."""
        try:
            raw = self.store.get(self.key)
            if not raw:
                return [], []
            entries = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning("Error loading vendors from storage, treating as empty: %s", e)
            return [], []

        if not isinstance(entries, list):
            logger.warning("Error loading vendors from storage, treating as empty: not a JSON array")
            return [], []

        vendors: list[Vendor] = []
        rejected: list[Any] = []
        for entry in entries:
            try:
                vendors.append(_vendor.validate_python(entry))
            except ValidationError as e:
                entry_id = entry.get("id") if isinstance(entry, dict) else None
                logger.warning("Skipping invalid vendor record %s: %s", entry_id, e)
                rejected.append(entry)
        return vendors, rejected

    def _new_id(self, existing: list[Vendor], rejected: list[Any]) -> str:
        taken = {v.id for v in existing}
        taken.update(e.get("id") for e in rejected if isinstance(e, dict))
        vendor_id = self._id_factory()
        while vendor_id in taken:
            vendor_id = self._id_factory()
        return vendor_id

    def _save(self, vendors: list[Vendor], rejected: list[Any]) -> None:
        # невалідні записи йдуть в кінець масиву, без змін
        entries = _vendor_list.dump_python(vendors, mode="json", by_alias=True) + rejected
        self.store.set(self.key, json.dumps(entries, ensure_ascii=False))
