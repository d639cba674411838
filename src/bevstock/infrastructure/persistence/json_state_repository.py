"""JSON-file-backed implementation of StateRepository.

The whole inventory lives in one file:

    {"version": 2, "products": [...], "sales": [...], "incoming_history": [...]}

Files written by the old browser dashboard have no top-level
``version``; they wrap the data as ``{"state": {...}, "version": 0}``
with camelCase keys.  Those are migrated on load.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from bevstock.domain.exceptions import PersistenceError, ValidationError
from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.model.product import Product, ProductVariant
from bevstock.domain.model.sale import Sale, SaleItem
from bevstock.domain.model.state import SCHEMA_VERSION, InventoryState
from bevstock.domain.model.value_objects import DEFAULT_CURRENCY, Money
from bevstock.domain.repository.state_repository import StateRepository

logger = logging.getLogger(__name__)


class JsonStateRepository(StateRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- StateRepository interface --------------------------------------------

    def load(self) -> InventoryState | None:
        if not self._file_path.exists():
            return None
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"{self._file_path} is not valid JSON: {exc}") from exc

        try:
            return self._to_domain(migrate(raw))
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"{self._file_path} has an unexpected shape: {exc!r}") from exc

    def save(self, state: InventoryState) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(
                json.dumps(self._to_raw(state), indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
            tmp_path.replace(self._file_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(state: InventoryState) -> dict:
        return {
            "version": SCHEMA_VERSION,
            "products": [
                {
                    "id": p.id,
                    "name": p.name,
                    "color": p.color,
                    "variants": [
                        {
                            "volume": v.volume,
                            "set_size": v.set_size,
                            "current_sets": v.current_sets,
                            "threshold": v.threshold,
                        }
                        for v in p.variants
                    ],
                    "last_updated": _dump_time(p.last_updated),
                }
                for p in state.products
            ],
            "sales": [
                {
                    "id": s.id,
                    "customer_name": s.customer_name,
                    "customer_address": s.customer_address,
                    "customer_phone": s.customer_phone,
                    "items": [
                        {
                            "product_id": i.product_id,
                            "product_name": i.product_name,
                            "volume": i.volume,
                            "set_size": i.set_size,
                            "sets_sold": i.sets_sold,
                            "price_per_set": str(i.price_per_set.amount),
                            "total_price": str(i.total_price.amount),
                        }
                        for i in s.items
                    ],
                    "total_amount": str(s.total_amount.amount),
                    "currency": s.total_amount.currency,
                    "notes": s.notes,
                    "timestamp": _dump_time(s.timestamp),
                }
                for s in state.sales
            ],
            "incoming_history": [
                {
                    "id": e.id,
                    "product_id": e.product_id,
                    "product_name": e.product_name,
                    "volume": e.volume,
                    "set_size": e.set_size,
                    "sets_received": e.sets_received,
                    "notes": e.notes,
                    "timestamp": _dump_time(e.timestamp),
                }
                for e in state.incoming_history
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryState:
        products = tuple(
            Product(
                id=p["id"],
                name=p["name"],
                color=p.get("color", ""),
                variants=tuple(
                    ProductVariant(
                        volume=v["volume"],
                        set_size=v["set_size"],
                        current_sets=v["current_sets"],
                        threshold=v["threshold"],
                    )
                    for v in p["variants"]
                ),
                last_updated=_load_time(p.get("last_updated")),
            )
            for p in raw.get("products", [])
        )

        sales = []
        for s in raw.get("sales", []):
            currency = s.get("currency", DEFAULT_CURRENCY)
            sales.append(
                Sale(
                    id=s["id"],
                    customer_name=s["customer_name"],
                    customer_address=s.get("customer_address", ""),
                    customer_phone=s.get("customer_phone", ""),
                    items=tuple(
                        SaleItem(
                            product_id=i["product_id"],
                            product_name=i["product_name"],
                            volume=i["volume"],
                            set_size=i["set_size"],
                            sets_sold=i["sets_sold"],
                            price_per_set=Money(Decimal(i["price_per_set"]), currency),
                            total_price=Money(Decimal(i["total_price"]), currency),
                        )
                        for i in s["items"]
                    ),
                    total_amount=Money(Decimal(s["total_amount"]), currency),
                    notes=s.get("notes"),
                    timestamp=_load_time(s["timestamp"]),
                )
            )

        incoming = tuple(
            IncomingEntry(
                id=e["id"],
                product_id=e["product_id"],
                product_name=e["product_name"],
                volume=e["volume"],
                set_size=e["set_size"],
                sets_received=e["sets_received"],
                notes=e.get("notes"),
                timestamp=_load_time(e["timestamp"]),
            )
            for e in raw.get("incoming_history", [])
        )

        return InventoryState(products=products, sales=tuple(sales), incoming_history=incoming)


# --- Schema migration ---------------------------------------------------------


def migrate(raw: dict) -> dict:
    """Bring a loaded blob up to ``SCHEMA_VERSION``."""
    if not isinstance(raw, dict):
        raise PersistenceError("Inventory file must contain a JSON object")

    version = raw.get("version") if "products" in raw else None
    if version is None:
        logger.info("Migrating legacy inventory blob to schema version %d", SCHEMA_VERSION)
        return _migrate_legacy(raw.get("state", raw))
    if version > SCHEMA_VERSION:
        raise PersistenceError(
            f"Inventory file has schema version {version}, "
            f"this program understands up to {SCHEMA_VERSION}"
        )
    return raw


def _migrate_legacy(state: dict) -> dict:
    """Convert the camelCase browser-store layout (schema 1)."""
    return {
        "version": SCHEMA_VERSION,
        "products": [
            {
                "id": p["id"],
                "name": p["name"],
                "color": p.get("color", ""),
                "variants": [
                    {
                        "volume": v["volume"],
                        "set_size": v["setSize"],
                        "current_sets": v["currentSets"],
                        "threshold": v["threshold"],
                    }
                    for v in p.get("variants", [])
                ],
                "last_updated": p.get("lastUpdated"),
            }
            for p in state.get("products", [])
        ],
        "sales": [
            {
                "id": s["id"],
                "customer_name": s.get("customerName", ""),
                "customer_address": s.get("customerAddress", ""),
                "customer_phone": s.get("customerPhone", ""),
                "items": [
                    {
                        "product_id": i["productId"],
                        "product_name": i["productName"],
                        "volume": i["volume"],
                        "set_size": i["setSize"],
                        "sets_sold": i["setsSold"],
                        "price_per_set": str(i["pricePerSet"]),
                        "total_price": str(i["totalPrice"]),
                    }
                    for i in s.get("items", [])
                ],
                "total_amount": str(s["totalAmount"]),
                "notes": s.get("notes"),
                "timestamp": s["timestamp"],
            }
            for s in state.get("sales", [])
        ],
        "incoming_history": [
            {
                "id": e["id"],
                "product_id": e["productId"],
                "product_name": e["productName"],
                "volume": e["volume"],
                "set_size": e["setSize"],
                "sets_received": e["setsReceived"],
                "notes": e.get("notes"),
                "timestamp": e["timestamp"],
            }
            for e in state.get("incomingHistory", [])
        ],
    }


# --- Time helpers -------------------------------------------------------------


def _dump_time(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_time(value: str | None) -> datetime | None:
    """Parse an ISO-8601 string; naive values are taken as local time."""
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed
