"""JSON-file-backed implementation of ProductCatalog.

The whole catalog is one JSON array. Every ``save`` rewrites it through
a temporary file and ``os.replace``, so a reader sees either the old or
the new document, never a half-written one.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_catalog import ProductCatalog


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductCatalog interface ---------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()
        if product.id is None:
            product.id = max(products, default=0) + 1
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._load().values())

    def find_by_status(self, status: ProductStatus) -> list[Product]:
        return [p for p in self._load().values() if p.status == status]

    def find_by_name_containing(self, substring: str) -> list[Product]:
        return [p for p in self._load().values() if substring in p.name]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                description=item.get("description"),
                price=Money(Decimal(item["price"])),
                stock_quantity=item["stock_quantity"],
                status=ProductStatus(item["status"]),
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=(
                    datetime.fromisoformat(item["updated_at"])
                    if item.get("updated_at")
                    else None
                ),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "stock_quantity": p.stock_quantity,
                "status": p.status.value,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat() if p.updated_at else None,
            }
            for p in products.values()
        ]
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
