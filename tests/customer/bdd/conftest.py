"""Shared BDD fixtures and step definitions for customers."""

import pytest
from ecommerce.customer.address import Address
from ecommerce.customer.customer import Customer
from ecommerce.customer.events import CustomerAddressChanged, CustomerCreated
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "CustomerCreated": CustomerCreated,
    "CustomerAddressChanged": CustomerAddressChanged,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a new customer named "{name}"'), target_fixture="customer")
def new_customer(name):
    customer = Customer.create(name=name, id="1")
    customer._events.clear()
    return customer


@given(parsers.cfparse('the customer lives at "{street}" {number:d} "{zip}" "{city}"'))
def customer_lives_at(customer, street, number, zip, city):
    customer.change_address(Address(street=street, number=number, zip=zip, city=city))
    customer._events.clear()


@given("the customer is active")
def customer_is_activated(customer):
    customer.activate()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the customer is active")
def customer_is_active(customer):
    assert customer.is_active() is True


@then("the customer is not active")
def customer_is_not_active(customer):
    assert customer.is_active() is False


@then(parsers.cfparse('the change is rejected with "{message}"'))
def change_rejected(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(customer, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in customer._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in customer._events]}"
