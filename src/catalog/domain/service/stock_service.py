"""Domain service: Stock reservation.

``Product.remove_stock`` only keeps the count from going negative. This
service adds the selling rule on top: a product that is not available
cannot have stock reserved at all, and that refusal is reported
separately from a plain shortage so callers can tell the two apart.

Holds no state; it operates on the products handed to it.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import OutOfStockError
from catalog.domain.model.product import Product

logger = logging.getLogger(__name__)


class StockService:

    def reserve_stock(self, product: Product, quantity: int) -> None:
        """Take *quantity* units out of stock for a consumer.

        Raises OutOfStockError with ``available=0`` if the product is
        not sellable, or with the real count if there are too few units.
        """
        if not product.is_available:
            logger.debug(
                "Reservation of %d refused: product %s is not available",
                quantity, product.id,
            )
            raise OutOfStockError(product.id, requested=quantity, available=0)

        if product.stock_quantity < quantity:
            logger.debug(
                "Reservation of %d refused: product %s has %d in stock",
                quantity, product.id, product.stock_quantity,
            )
            raise OutOfStockError(
                product.id, requested=quantity, available=product.stock_quantity
            )

        product.remove_stock(quantity)

    def release_stock(self, product: Product, quantity: int) -> None:
        """Put *quantity* units back, even onto a discontinued product."""
        product.add_stock(quantity)

    def has_enough_stock(self, product: Product, quantity: int) -> bool:
        return product.is_available and product.stock_quantity >= quantity
