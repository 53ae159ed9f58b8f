"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from ecommerce.domain import ecommerce


@ecommerce.event(part_of="Customer")
class CustomerCreated:
    """A new customer was created."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    name: String(required=True)
    created_at: DateTime(required=True)


@ecommerce.event(part_of="Customer")
class CustomerAddressChanged:
    """A customer's address was replaced.

    Addresses are carried as JSON text. ``old_address`` is empty when the
    customer had no address before.
    """

    __version__ = "v1"

    customer_id: Identifier(required=True)
    old_address: Text()
    new_address: Text(required=True)
    changed_at: DateTime(required=True)
