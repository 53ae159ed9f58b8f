"""Order aggregate with OrderItem entities."""

from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String

from ecommerce.domain import ecommerce


def _check_customer_id(customer_id):
    if not str(customer_id or "").strip():
        raise ValidationError({"customer_id": ["Customer ID is required"]})


@ecommerce.entity(part_of="Order")
class OrderItem:
    """A product line on an order, with the price captured at ordering time."""

    name: String(required=True, max_length=255)
    price: Float(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)

    @invariant.post
    def price_cannot_be_negative(self):
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": ["Price must be greater than zero"]})

    @invariant.post
    def quantity_must_be_positive(self):
        if self.quantity is not None and self.quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

    def total(self):
        return self.price * self.quantity


@ecommerce.aggregate
class Order:
    """A customer's purchase of one or more order items.

    ``total`` is kept equal to the sum of item totals by every operation
    that touches the items.
    """

    customer_id: Identifier(required=True)
    items: HasMany(OrderItem)
    total: Float(default=0.0)

    @classmethod
    def create(cls, customer_id, items, id=None):
        _check_customer_id(customer_id)
        if not items:
            raise ValidationError({"items": ["Items are required"]})

        order = cls(id=id or str(uuid4()), customer_id=customer_id)
        order.add_line_items(*items)
        order.validate()
        return order

    def validate(self):
        _check_customer_id(self.customer_id)
        if not self.items:
            raise ValidationError({"items": ["Items are required"]})
        if any(item.quantity <= 0 for item in self.items):
            raise ValidationError({"quantity": ["Quantity must be greater than zero"]})

    def _recalculate_total(self):
        self.total = sum(item.total() for item in self.items)

    def change_customer_id(self, customer_id):
        _check_customer_id(customer_id)
        self.customer_id = customer_id

    def add_line_items(self, *items):
        for item in items:
            self.add_items(item)
        self._recalculate_total()
