"""Tests for ProductFactory."""

import pytest
from ecommerce.product.factory import ProductFactory
from ecommerce.product.product import Product, ProductB
from protean.exceptions import ValidationError


def test_create_product_type_a():
    product = ProductFactory.create("a", "Product A", 100)

    assert product.id is not None
    assert product.name == "Product A"
    assert product.price == 100
    assert isinstance(product, Product)


def test_create_product_type_b():
    product = ProductFactory.create("b", "Product B", 100)

    assert product.id is not None
    assert product.name == "Product B"
    assert product.price == 200
    assert isinstance(product, ProductB)


def test_invalid_product_type():
    with pytest.raises(ValidationError) as exc:
        ProductFactory.create("c", "Product C", 100)
    assert "Invalid product type" in str(exc.value)


def test_only_type_a_announces_creation(capsys):
    product_a = ProductFactory.create("a", "Product A", 100)
    product_b = ProductFactory.create("b", "Product B", 100)

    assert len(product_a._events) == 1
    assert product_b._events == []
    assert capsys.readouterr().out.splitlines() == [
        "Sending email to the catalogue team: product 'Product A' created at 100.00"
    ]
