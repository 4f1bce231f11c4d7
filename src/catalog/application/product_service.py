"""Application service: product catalog use cases.

Orchestrates the flow between the catalog and the domain model, one
aggregate per call. Mutating use cases follow the same shape:

1. Load the product (fail if not found).
2. Let the aggregate, or the StockService, enforce the business rules.
3. Save, only once every rule has passed.
4. Return a DTO.

Because nothing is saved until step 3, a failed call leaves the stored
product untouched.
"""

from __future__ import annotations

import logging

from catalog.application.dto import NewProductSpec, ProductDTO, ProductUpdateSpec
from catalog.domain.exceptions import ProductNotFoundError, ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_catalog import ProductCatalog
from catalog.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class ProductApplicationService:

    def __init__(
        self,
        catalog: ProductCatalog,
        stock_service: StockService | None = None,
    ) -> None:
        self._catalog = catalog
        self._stock_service = stock_service or StockService()

    # --- Commands -------------------------------------------------------------

    def create_product(self, spec: NewProductSpec) -> ProductDTO:
        """Add a new product to the catalog."""
        self._validate_name(spec.name)
        if spec.stock_quantity < 0:
            raise ValidationError("Initial stock quantity cannot be negative")

        product = Product.create(
            name=spec.name.strip(),
            description=spec.description,
            price=spec.price,
            stock_quantity=spec.stock_quantity,
        )
        saved = self._catalog.save(product)
        logger.info("Product %s created: %r", saved.id, saved.name)
        return ProductDTO.from_product(saved)

    def update_product(self, product_id: int, spec: ProductUpdateSpec) -> ProductDTO:
        product = self._find_product(product_id)
        self._validate_name(spec.name)

        product.update_info(spec.name.strip(), spec.description, spec.price)
        self._catalog.save(product)
        logger.info("Product %s updated", product_id)
        return ProductDTO.from_product(product)

    def add_stock(self, product_id: int, quantity: int) -> ProductDTO:
        product = self._find_product(product_id)

        self._stock_service.release_stock(product, quantity)
        self._catalog.save(product)
        logger.info(
            "Product %s: %d added to stock (now %d)",
            product_id, quantity, product.stock_quantity,
        )
        return ProductDTO.from_product(product)

    def remove_stock(self, product_id: int, quantity: int) -> ProductDTO:
        """Reserve stock; OutOfStockError propagates to the caller."""
        product = self._find_product(product_id)

        self._stock_service.reserve_stock(product, quantity)
        self._catalog.save(product)
        logger.info(
            "Product %s: %d reserved from stock (now %d)",
            product_id, quantity, product.stock_quantity,
        )
        return ProductDTO.from_product(product)

    def discontinue_product(self, product_id: int) -> ProductDTO:
        product = self._find_product(product_id)

        product.discontinue()
        self._catalog.save(product)
        logger.info("Product %s discontinued", product_id)
        return ProductDTO.from_product(product)

    def activate_product(self, product_id: int) -> ProductDTO:
        product = self._find_product(product_id)

        product.activate()
        self._catalog.save(product)
        logger.info("Product %s activated", product_id)
        return ProductDTO.from_product(product)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: int) -> ProductDTO:
        return ProductDTO.from_product(self._find_product(product_id))

    def get_all_products(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._catalog.find_all()]

    def get_available_products(self) -> list[ProductDTO]:
        """Products whose stored status is AVAILABLE.

        This filters on status only, so an AVAILABLE product with no
        stock is included even though its ``available`` flag is False.
        """
        return [
            ProductDTO.from_product(p)
            for p in self._catalog.find_by_status(ProductStatus.AVAILABLE)
        ]

    def search_products(self, name: str) -> list[ProductDTO]:
        return [
            ProductDTO.from_product(p)
            for p in self._catalog.find_by_name_containing(name)
        ]

    def quote_price(self, product_id: int, quantity: int) -> Money:
        """Extended price for *quantity* units at the current price."""
        return self._find_product(product_id).calculate_total_price(quantity)

    def check_stock(self, product_id: int, quantity: int) -> bool:
        product = self._find_product(product_id)
        return self._stock_service.has_enough_stock(product, quantity)

    # --- Internal helpers -----------------------------------------------------

    def _find_product(self, product_id: int) -> Product:
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
