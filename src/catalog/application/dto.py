"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class NewProductSpec:
    """Input: a product to add to the catalog."""

    name: str
    price: str | int | float | Decimal | None
    description: str | None = None
    stock_quantity: int = 0


@dataclass(frozen=True)
class ProductUpdateSpec:
    """Input: replacement descriptive fields and price."""

    name: str
    price: str | int | float | Decimal | None
    description: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: the projected view of a product."""

    id: int
    name: str
    description: str | None
    price: Decimal
    stock_quantity: int
    status: str
    available: bool
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            price=product.price.amount,
            stock_quantity=product.stock_quantity,
            status=product.status.value,
            available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (strings for Decimal and datetimes)."""
        data = asdict(self)
        data["price"] = str(self.price)
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data
