"""Product aggregate.

A product owns its price and its stock count and enforces every
invariant over them. It never touches storage itself; the application
layer loads it, calls one of its methods and saves it back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import InsufficientStockError, InvalidQuantityError
from catalog.domain.model.value_objects import Money


class ProductStatus(Enum):
    AVAILABLE = "AVAILABLE"
    DISCONTINUED = "DISCONTINUED"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """Aggregate root for the product catalog.

    Use the ``Product.create()`` factory for new products. The
    ``__init__`` is intentionally simple so the catalog can reconstitute
    persisted products without re-validating.

    Invariants:
    - ``stock_quantity`` is never negative
    - ``created_at`` never changes after creation
    """

    id: int | None
    name: str
    description: str | None
    price: Money
    stock_quantity: int
    status: ProductStatus = ProductStatus.AVAILABLE
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str | None,
        price: str | int | float | Decimal | None,
        stock_quantity: int,
    ) -> Product:
        """Create a new, sellable product.

        Stock may legitimately start at zero; it is not checked here.
        """
        return Product(
            id=None,
            name=name,
            description=description,
            price=Money.of(price),
            stock_quantity=stock_quantity,
        )

    # --- Mutations ------------------------------------------------------------

    def update_info(
        self,
        name: str,
        description: str | None,
        price: str | int | float | Decimal | None,
    ) -> None:
        """Replace the descriptive fields and the price.

        Stock and status are left alone.
        """
        new_price = Money.of(price)
        self.name = name
        self.description = description
        self.price = new_price
        self._touch()

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantityError("Quantity of stock to add must be positive")
        self.stock_quantity += quantity
        self._touch()

    def remove_stock(self, quantity: int) -> None:
        """Take stock out, refusing to go below zero.

        On failure the aggregate is left exactly as it was.
        """
        if quantity <= 0:
            raise InvalidQuantityError("Quantity of stock to remove must be positive")
        rest = self.stock_quantity - quantity
        if rest < 0:
            raise InsufficientStockError(current_stock=self.stock_quantity)
        self.stock_quantity = rest
        self._touch()

    # --- State transitions ----------------------------------------------------

    def discontinue(self) -> None:
        self.status = ProductStatus.DISCONTINUED
        self._touch()

    def activate(self) -> None:
        """Put the product back on sale.

        Does not require stock: ``is_available`` still looks at both.
        """
        self.status = ProductStatus.AVAILABLE
        self._touch()

    # --- Computed properties --------------------------------------------------

    @property
    def is_available(self) -> bool:
        return self.status == ProductStatus.AVAILABLE and self.stock_quantity > 0

    def calculate_total_price(self, quantity: int) -> Money:
        return self.price.multiply(quantity)

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = _now()
