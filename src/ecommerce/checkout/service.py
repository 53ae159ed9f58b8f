"""Domain service spanning the Order and Customer aggregates."""

import structlog
from protean.exceptions import ValidationError

from ecommerce.checkout.order import Order

logger = structlog.get_logger(__name__)


class OrderService:
    @staticmethod
    def place_order(customer, items):
        """Create an order for ``customer`` and credit half its total as reward points."""
        if not items:
            raise ValidationError({"items": ["Order must have at least one item"]})

        order = Order.create(customer_id=customer.id, items=items)
        customer.add_reward_points(order.total / 2)

        logger.info(
            "Order placed",
            order_id=order.id,
            customer_id=customer.id,
            total=order.total,
        )
        return order

    @staticmethod
    def total(orders):
        return sum(order.total for order in orders)
