"""Factory for building customers with generated identities."""

from uuid import uuid4

import structlog

from ecommerce.customer.customer import Customer

logger = structlog.get_logger(__name__)


class CustomerFactory:
    @staticmethod
    def create(name):
        customer = Customer.create(name=name, id=str(uuid4()))
        logger.info("Customer created", customer_id=customer.id)
        return customer

    @staticmethod
    def create_with_address(name, address):
        customer = CustomerFactory.create(name)
        customer.change_address(address)
        return customer
