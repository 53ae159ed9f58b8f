"""Default wiring of console handlers onto the dispatcher."""

from ecommerce.customer.events import CustomerAddressChanged, CustomerCreated
from ecommerce.customer.handlers import (
    SendConsoleLog1WhenCustomerIsCreatedHandler,
    SendConsoleLog2WhenCustomerIsCreatedHandler,
    SendConsoleLogWhenCustomerAddressIsChangedHandler,
)
from ecommerce.product.events import ProductCreated
from ecommerce.product.handlers import SendEmailWhenProductIsCreatedHandler
from ecommerce.shared.event.dispatcher import EventDispatcher


def register_default_handlers(dispatcher: EventDispatcher) -> EventDispatcher:
    """Reset ``dispatcher`` to the default handler set."""
    dispatcher.unregister_all()

    dispatcher.register(CustomerCreated.__name__, SendConsoleLog1WhenCustomerIsCreatedHandler())
    dispatcher.register(CustomerCreated.__name__, SendConsoleLog2WhenCustomerIsCreatedHandler())
    dispatcher.register(CustomerAddressChanged.__name__, SendConsoleLogWhenCustomerAddressIsChangedHandler())
    dispatcher.register(ProductCreated.__name__, SendEmailWhenProductIsCreatedHandler())

    return dispatcher
