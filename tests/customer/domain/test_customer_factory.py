"""Tests for CustomerFactory."""

from ecommerce.customer.address import Address
from ecommerce.customer.customer import Customer
from ecommerce.customer.events import CustomerAddressChanged, CustomerCreated
from ecommerce.customer.factory import CustomerFactory


def test_create_customer():
    customer = CustomerFactory.create("John Doe")

    assert isinstance(customer, Customer)
    assert customer.id is not None
    assert customer.name == "John Doe"
    assert customer.address is None


def test_create_assigns_distinct_identities():
    assert CustomerFactory.create("A").id != CustomerFactory.create("B").id


def test_create_customer_with_address():
    address = Address(street="Street 1", number=123, zip="9999", city="São Paulo")

    customer = CustomerFactory.create_with_address("John Doe", address)

    assert isinstance(customer, Customer)
    assert customer.id is not None
    assert customer.name == "John Doe"
    assert customer.address == address
    assert [type(e) for e in customer._events] == [CustomerCreated, CustomerAddressChanged]
