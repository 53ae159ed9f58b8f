"""Repository for the Order aggregate."""

from ecommerce.checkout.order import Order
from ecommerce.domain import ecommerce


@ecommerce.repository(part_of=Order)
class OrderRepository:
    """Persists orders together with their items.

    Items live in their own table; saving an order writes the current item
    set and the recomputed total in one unit of work.
    """

    def create(self, order: Order) -> None:
        self.add(order)

    def update(self, order: Order) -> None:
        self.get(order.id)
        self.add(order)

    def find(self, order_id: str) -> Order:
        return self.get(order_id)

    def find_all(self) -> list[Order]:
        return self._dao.query.all().items

    def find_by_customer(self, customer_id: str) -> list[Order]:
        return self._dao.query.filter(customer_id=customer_id).all().items
