"""Console handlers for Product events."""

from ecommerce.shared.event.dispatcher import EventHandler


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    def handle(self, event) -> None:
        print(f"Sending email to the catalogue team: product '{event.name}' created at {event.price:.2f}")
