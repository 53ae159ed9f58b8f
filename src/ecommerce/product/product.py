"""Product aggregates.

``Product`` is the regular catalogue item. ``ProductB`` is a second product
line whose customer-facing price is twice its base price.
"""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import Float, String

from ecommerce.domain import ecommerce
from ecommerce.product.events import ProductCreated
from ecommerce.shared.event.dispatcher import publish


def _check_price(price):
    if price is None or price < 0:
        raise ValidationError({"price": ["Price must be greater than zero"]})


@ecommerce.aggregate
class Product:
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)

    @classmethod
    def create(cls, name, price, id=None):
        """Build a product and announce it with ``ProductCreated``."""
        _check_price(price)

        kwargs = {"name": name, "price": price}
        if id is not None:
            kwargs["id"] = id

        product = cls(**kwargs)
        publish(
            product,
            ProductCreated(
                product_id=product.id,
                name=product.name,
                price=product.price,
                created_at=datetime.now(),
            ),
        )
        return product

    def change_name(self, name):
        self.name = name

    def change_price(self, price):
        _check_price(price)
        self.price = price


@ecommerce.aggregate
class ProductB:
    name: String(required=True, max_length=255)
    base_price: Float(required=True, min_value=0.0)

    @property
    def price(self):
        return self.base_price * 2

    def change_name(self, name):
        self.name = name

    def change_price(self, price):
        """Set the reported price; the stored base price is half of it."""
        _check_price(price)
        self.base_price = price / 2
