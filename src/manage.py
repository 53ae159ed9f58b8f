"""ecommerce management CLI.

Provides commands to create and drop the database schema, and a demo that
walks through the domain model end to end.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py demo       # Customer, address, order walkthrough
"""

import argparse
import sys


def setup_database():
    from ecommerce.domain import init_domain
    from ecommerce.utils.db import setup_db

    print("Initializing ecommerce domain...")
    domain = init_domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from ecommerce.domain import init_domain
    from ecommerce.utils.db import drop_db

    print("Initializing ecommerce domain...")
    domain = init_domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def run_demo(persist=False):
    """Create a customer with an address, activate them and place an order."""
    from ecommerce.checkout.order import OrderItem
    from ecommerce.checkout.service import OrderService
    from ecommerce.customer.address import Address
    from ecommerce.customer.customer import Customer
    from ecommerce.domain import init_domain

    domain = init_domain()
    with domain.domain_context():
        customer = Customer.create(name="John Doe", id="1")
        customer.change_address(Address(street="Main Street", number=123, zip="12345", city="Springfield"))
        customer.activate()

        items = [
            OrderItem(id="1", name="Laptop", price=1000, product_id="p1", quantity=1),
            OrderItem(id="2", name="Mouse", price=20, product_id="p2", quantity=1),
        ]
        order = OrderService.place_order(customer, items)

        if persist:
            from ecommerce.checkout.order import Order
            from ecommerce.utils.db import setup_db

            setup_db(domain)
            domain.repository_for(Customer).create(customer)
            domain.repository_for(Order).create(order)

        print(f"Order {order.id} for {customer.name}: total {order.total:.2f}")
        print(f"Reward points: {customer.reward_points:.2f}")


def main():
    parser = argparse.ArgumentParser(description="ecommerce database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    demo_parser = subparsers.add_parser("demo", help="Run the domain walkthrough")
    demo_parser.add_argument(
        "--persist",
        action="store_true",
        help="Save the demo customer and order to the configured database",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "demo":
        run_demo(persist=args.persist)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
