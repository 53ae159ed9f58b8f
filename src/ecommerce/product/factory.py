"""Factory selecting the product line by type code."""

from uuid import uuid4

import structlog
from protean.exceptions import ValidationError

from ecommerce.product.product import Product, ProductB

logger = structlog.get_logger(__name__)


class ProductFactory:
    @staticmethod
    def create(product_type, name, price):
        """Build a product: ``"a"`` is a ``Product``, ``"b"`` a ``ProductB``.

        Only ``"a"`` goes through ``Product.create`` and announces itself with
        ``ProductCreated``. ``ProductB`` is a separate aggregate, and that
        event belongs to ``Product``, so a ``"b"`` product is built silently.
        """
        if product_type == "a":
            product = Product.create(name=name, price=price, id=str(uuid4()))
        elif product_type == "b":
            product = ProductB(id=str(uuid4()), name=name, base_price=price)
        else:
            raise ValidationError({"product_type": ["Invalid product type"]})

        logger.info("Product created", product_id=product.id, product_type=product_type)
        return product
