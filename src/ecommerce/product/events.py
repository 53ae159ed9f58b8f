"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from ecommerce.domain import ecommerce


@ecommerce.event(part_of="Product")
class ProductCreated:
    """A product was added to the catalogue."""

    __version__ = "v1"

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)
