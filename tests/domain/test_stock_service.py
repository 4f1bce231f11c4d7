"""Unit tests for the StockService domain service."""

import copy

import pytest

from catalog.domain.exceptions import InvalidQuantityError, OutOfStockError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.service.stock_service import StockService


def _make_product(stock: int = 100) -> Product:
    product = Product.create("Widget", None, 10000, stock)
    product.id = 1
    return product


class TestReserveStock:

    def test_reserve_reduces_stock(self):
        product = _make_product(100)
        StockService().reserve_stock(product, 30)
        assert product.stock_quantity == 70

    def test_second_reservation_reports_remaining_stock(self):
        product = _make_product(100)
        svc = StockService()
        svc.reserve_stock(product, 30)

        with pytest.raises(OutOfStockError) as exc_info:
            svc.reserve_stock(product, 80)

        assert exc_info.value.product_id == 1
        assert exc_info.value.requested == 80
        assert exc_info.value.available == 70
        assert product.stock_quantity == 70

    def test_discontinued_product_reports_zero_available(self):
        product = _make_product(100)
        product.discontinue()

        with pytest.raises(OutOfStockError) as exc_info:
            StockService().reserve_stock(product, 10)

        assert exc_info.value.available == 0
        assert exc_info.value.requested == 10
        assert product.stock_quantity == 100

    def test_product_without_stock_reports_zero_available(self):
        product = _make_product(0)
        with pytest.raises(OutOfStockError) as exc_info:
            StockService().reserve_stock(product, 1)
        assert exc_info.value.available == 0

    def test_non_positive_quantity_rejected_by_product(self):
        product = _make_product(100)
        with pytest.raises(InvalidQuantityError):
            StockService().reserve_stock(product, 0)


class TestReleaseStock:

    def test_release_increases_stock(self):
        product = _make_product(100)
        StockService().release_stock(product, 50)
        assert product.stock_quantity == 150

    def test_release_onto_discontinued_product(self):
        product = _make_product(10)
        product.discontinue()

        StockService().release_stock(product, 5)

        assert product.stock_quantity == 15
        assert product.status == ProductStatus.DISCONTINUED

    def test_release_non_positive_quantity_rejected(self):
        product = _make_product(10)
        with pytest.raises(InvalidQuantityError):
            StockService().release_stock(product, -1)


class TestHasEnoughStock:

    def test_enough_stock(self):
        assert StockService().has_enough_stock(_make_product(100), 100)

    def test_not_enough_stock(self):
        assert not StockService().has_enough_stock(_make_product(10), 11)

    def test_discontinued_product_never_has_enough(self):
        product = _make_product(100)
        product.discontinue()
        assert not StockService().has_enough_stock(product, 1)

    @pytest.mark.parametrize("quantity", [-1, 0, 1, 100, 1000])
    def test_never_mutates_product(self, quantity):
        product = _make_product(100)
        before = copy.deepcopy(product)

        StockService().has_enough_stock(product, quantity)

        assert product == before
