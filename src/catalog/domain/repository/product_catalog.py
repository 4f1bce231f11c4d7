"""Abstract catalog (repository) for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product, ProductStatus


class ProductCatalog(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product.

        Assigns ``product.id`` on first save and returns the product.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_status(self, status: ProductStatus) -> list[Product]:
        """Return every product whose stored status equals *status*."""

    @abstractmethod
    def find_by_name_containing(self, substring: str) -> list[Product]:
        """Return products whose name contains *substring* (case-sensitive)."""
