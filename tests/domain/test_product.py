"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import (
    InsufficientStockError,
    InvalidAmountError,
    InvalidQuantityError,
)
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money


def _make_product(stock: int = 100) -> Product:
    return Product.create("Widget", "A very useful widget", 10000, stock)


class TestProductCreate:

    def test_new_product_is_available(self):
        product = _make_product()
        assert product.id is None
        assert product.name == "Widget"
        assert product.price == Money.of(10000)
        assert product.stock_quantity == 100
        assert product.status == ProductStatus.AVAILABLE
        assert product.is_available
        assert product.created_at is not None
        assert product.updated_at is None

    def test_zero_stock_is_not_available(self):
        product = _make_product(stock=0)
        assert product.status == ProductStatus.AVAILABLE
        assert not product.is_available

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidAmountError):
            Product.create("Widget", None, -1, 10)

    def test_missing_price_rejected(self):
        with pytest.raises(InvalidAmountError):
            Product.create("Widget", None, None, 10)


class TestProductUpdateInfo:

    def test_replaces_descriptive_fields_and_price(self):
        product = _make_product()
        product.update_info("Gadget", "Shiny", "15.50")

        assert product.name == "Gadget"
        assert product.description == "Shiny"
        assert product.price == Money.of("15.50")
        assert product.updated_at is not None

    def test_leaves_stock_and_status_alone(self):
        product = _make_product()
        product.discontinue()
        product.update_info("Gadget", None, 1)

        assert product.stock_quantity == 100
        assert product.status == ProductStatus.DISCONTINUED

    def test_invalid_price_leaves_product_unchanged(self):
        product = _make_product()
        with pytest.raises(InvalidAmountError):
            product.update_info("Gadget", "Shiny", -10)

        assert product.name == "Widget"
        assert product.price == Money.of(10000)
        assert product.updated_at is None


class TestProductAddStock:

    def test_add_increases_stock(self):
        product = _make_product()
        product.add_stock(25)
        assert product.stock_quantity == 125
        assert product.updated_at is not None

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        product = _make_product()
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            product.add_stock(quantity)
        assert product.stock_quantity == 100


class TestProductRemoveStock:

    def test_remove_decreases_stock(self):
        product = _make_product()
        product.remove_stock(30)
        assert product.stock_quantity == 70

    def test_remove_all_stock(self):
        product = _make_product(stock=10)
        product.remove_stock(10)
        assert product.stock_quantity == 0
        assert not product.is_available

    def test_remove_more_than_stock_rejected(self):
        product = _make_product()
        with pytest.raises(InsufficientStockError) as exc_info:
            product.remove_stock(150)

        assert exc_info.value.current_stock == 100
        assert product.stock_quantity == 100
        assert product.updated_at is None

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_non_positive_quantity_rejected(self, quantity):
        product = _make_product()
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            product.remove_stock(quantity)


class TestProductStatusTransitions:

    def test_discontinue(self):
        product = _make_product()
        product.discontinue()
        assert product.status == ProductStatus.DISCONTINUED
        assert not product.is_available

    def test_discontinue_is_idempotent(self):
        product = _make_product()
        product.discontinue()
        first_update = product.updated_at
        product.discontinue()
        assert product.status == ProductStatus.DISCONTINUED
        assert product.updated_at >= first_update

    def test_activate_restores_availability(self):
        product = _make_product()
        product.discontinue()
        product.activate()
        assert product.status == ProductStatus.AVAILABLE
        assert product.is_available

    def test_activate_does_not_require_stock(self):
        product = _make_product(stock=0)
        product.discontinue()
        product.activate()
        assert product.status == ProductStatus.AVAILABLE
        assert not product.is_available

    def test_created_at_never_changes(self):
        product = _make_product()
        created = product.created_at
        product.discontinue()
        product.activate()
        product.add_stock(1)
        assert product.created_at == created


class TestProductTotalPrice:

    def test_total_price_for_quantity(self):
        product = Product.create("Widget", None, "19.99", 10)
        assert product.calculate_total_price(3).amount == Decimal("59.97")

    def test_total_price_does_not_touch_stock(self):
        product = _make_product()
        product.calculate_total_price(5)
        assert product.stock_quantity == 100
        assert product.updated_at is None
