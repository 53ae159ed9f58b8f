"""Factory building orders from plain checkout data."""

from uuid import uuid4

import structlog

from ecommerce.checkout.order import Order, OrderItem

logger = structlog.get_logger(__name__)


class OrderFactory:
    @staticmethod
    def create(props):
        """Build an order from ``props``.

        Args:
            props: Dict with ``customer_id`` and ``items``, a list of dicts with
                ``product_id``, ``product_name``, ``quantity`` and ``price``.
        """
        items = [
            OrderItem(
                id=str(uuid4()),
                name=item["product_name"],
                price=item["price"],
                product_id=item["product_id"],
                quantity=item["quantity"],
            )
            for item in props["items"]
        ]

        order = Order.create(customer_id=props["customer_id"], items=items)
        logger.info("Order created", order_id=order.id, item_count=len(items))
        return order
