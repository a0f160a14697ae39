"""Catalog used when no backend is available."""

from __future__ import annotations

from pizzapos.domain.model.product import DEFAULT_GLYPH, Product
from pizzapos.domain.model.value_objects import Money

_SAMPLE_PRODUCTS = [
    ("1", "Margherita", "Classic tomato and mozzarella", "12.99"),
    ("2", "Pepperoni", "Spicy pepperoni with cheese", "14.99"),
    ("3", "Hawaiian", "Ham and pineapple", "13.99"),
    ("4", "Supreme", "All toppings included", "16.99"),
    ("5", "BBQ Chicken", "BBQ sauce with chicken", "15.99"),
    ("6", "Veggie Delight", "Fresh vegetables only", "13.99"),
]


def sample_products() -> list[Product]:
    return [
        Product(
            id=product_id,
            name=name,
            description=description,
            price=Money.of(price),
            image_path=DEFAULT_GLYPH,
        )
        for product_id, name, description, price in _SAMPLE_PRODUCTS
    ]
