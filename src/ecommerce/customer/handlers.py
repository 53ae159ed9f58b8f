"""Console handlers for Customer events."""

from ecommerce.shared.event.dispatcher import EventHandler


class SendConsoleLog1WhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event) -> None:
        print("This is the first console.log of the event: CustomerCreated")


class SendConsoleLog2WhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event) -> None:
        print("This is the second console.log of the event: CustomerCreated")


class SendConsoleLogWhenCustomerAddressIsChangedHandler(EventHandler):
    """Print the customer id, timestamp, and both addresses."""

    def handle(self, event) -> None:
        print(f"Address of customer '{event.customer_id}' changed. {event.changed_at}")
        print(f"Old address: {event.old_address}")
        print(f"New address: {event.new_address}")
