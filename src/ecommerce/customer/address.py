"""Address value object."""

from protean.fields import Integer, String

from ecommerce.domain import ecommerce


@ecommerce.value_object(part_of="Customer")
class Address:
    """Where a customer lives. Replaced wholesale, never edited in place."""

    street: String(required=True, max_length=255)
    number: Integer(required=True, min_value=1)
    zip: String(required=True, max_length=20)
    city: String(required=True, max_length=100)

    def __str__(self):
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
