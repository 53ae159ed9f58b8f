"""Repository for the Customer aggregate."""

from ecommerce.customer.customer import Customer
from ecommerce.domain import ecommerce


@ecommerce.repository(part_of=Customer)
class CustomerRepository:
    """Maps customers to and from the ``customer`` table.

    ``add``/``get`` come from the base repository; the methods here give the
    create/update/find vocabulary used across the store. Lookups of unknown
    identifiers raise ``ObjectNotFoundError``.
    """

    def create(self, customer: Customer) -> None:
        self.add(customer)

    def update(self, customer: Customer) -> None:
        # Only rows that already exist may be updated
        self.get(customer.id)
        self.add(customer)

    def find(self, customer_id: str) -> Customer:
        return self.get(customer_id)

    def find_all(self) -> list[Customer]:
        return self._dao.query.all().items

    def find_by_name(self, name: str) -> list[Customer]:
        return self._dao.query.filter(name=name).all().items
