"""Customer aggregate root with an Address value object."""

import json
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, String, ValueObject

from ecommerce.customer.address import Address
from ecommerce.customer.events import CustomerAddressChanged, CustomerCreated
from ecommerce.domain import ecommerce
from ecommerce.shared.event.dispatcher import publish


def _check_id(id):
    if not str(id or "").strip():
        raise ValidationError({"id": ["ID is required"]})


def _check_name(name):
    if not (name or "").strip():
        raise ValidationError({"name": ["Name is required"]})


@ecommerce.aggregate
class Customer:
    """A person who buys from the store.

    A customer starts inactive and without an address. Activation requires an
    address; reward points accumulate as orders are placed.
    """

    name: String(required=True, max_length=255)
    address: ValueObject(Address)
    active: Boolean(default=False)
    reward_points: Float(default=0.0)

    @invariant.post
    def name_cannot_be_blank(self):
        if self.name is not None:
            _check_name(self.name)

    @classmethod
    def create(cls, name, id=None):
        """Build a customer and announce it with ``CustomerCreated``."""
        kwargs = {"name": name}
        if id is not None:
            _check_id(id)
            kwargs["id"] = id
        _check_name(name)

        customer = cls(**kwargs)
        publish(
            customer,
            CustomerCreated(
                customer_id=customer.id,
                name=customer.name,
                created_at=datetime.now(),
            ),
        )
        return customer

    def validate(self):
        _check_id(self.id)
        _check_name(self.name)

    def change_name(self, name):
        _check_name(name)
        self.name = name

    def change_address(self, address):
        if address is None:
            raise ValidationError({"address": ["Address is required"]})

        event = CustomerAddressChanged(
            customer_id=self.id,
            old_address=json.dumps(self.address.to_dict()) if self.address else None,
            new_address=json.dumps(address.to_dict()),
            changed_at=datetime.now(),
        )
        self.address = address
        publish(self, event)

    def activate(self):
        if self.address is None:
            raise ValidationError({"address": ["Address is mandatory to activate a customer"]})

        self.active = True

    def deactivate(self):
        self.active = False

    def is_active(self):
        return self.active

    def add_reward_points(self, points):
        self.reward_points += points
