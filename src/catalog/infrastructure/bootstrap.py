"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.product_service import ProductApplicationService
from catalog.domain.service.stock_service import StockService
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)


def product_catalog(settings: Settings | None = None) -> JsonProductCatalog:
    settings = settings or get_settings()
    return JsonProductCatalog(settings.catalog_path)


def product_service(settings: Settings | None = None) -> ProductApplicationService:
    return ProductApplicationService(
        catalog=product_catalog(settings),
        stock_service=StockService(),
    )
