"""Product aggregate.

Products live independently of carts and orders. Both of those keep their
own snapshot of a product, so a Product is an immutable value: an edit
produces a new Product carrying the same identifier.
"""

from __future__ import annotations

from dataclasses import dataclass

from pizzapos.domain.exceptions import ValidationError
from pizzapos.domain.model.value_objects import Money

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 128
DEFAULT_GLYPH = "🍕"


def _validate(name: str, description: str, price: Money) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if len(name.strip()) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at most {MAX_NAME_LENGTH} characters"
        )
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Product description must be at most {MAX_DESCRIPTION_LENGTH} characters"
        )
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")


@dataclass(frozen=True)
class ProductDraft:
    """A product that has not been given an identifier yet."""

    name: str
    price: Money
    description: str = ""
    image_path: str | None = None

    def validate(self) -> None:
        """Raise ValidationError unless the draft may enter the catalog."""
        _validate(self.name, self.description, self.price)

    def normalized(self) -> ProductDraft:
        """Return a validated copy with the name trimmed."""
        self.validate()
        return ProductDraft(
            name=self.name.strip(),
            price=self.price,
            description=self.description.strip(),
            image_path=self.image_path or None,
        )

    def with_id(self, product_id: str) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            price=self.price,
            description=self.description,
            image_path=self.image_path,
        )


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    The identifier is assigned by the backend and never changes.
    """

    id: str
    name: str
    price: Money
    description: str = ""
    image_path: str | None = None

    @property
    def glyph(self) -> str:
        return self.image_path or DEFAULT_GLYPH

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Product ID is required")
        _validate(self.name, self.description, self.price)

    def normalized(self) -> Product:
        self.validate()
        return Product(
            id=self.id,
            name=self.name.strip(),
            price=self.price,
            description=self.description.strip(),
            image_path=self.image_path or None,
        )

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = query.strip().lower()
        return needle in self.name.lower() or needle in self.description.lower()
