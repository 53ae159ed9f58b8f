"""Domain service operating on many products at once."""

import structlog

logger = structlog.get_logger(__name__)


class ProductService:
    @staticmethod
    def increase_price(products, percentage):
        """Raise every product's price by ``percentage`` percent, in place."""
        for product in products:
            product.change_price(product.price + (product.price * percentage) / 100)

        logger.info("Prices increased", product_count=len(products), percentage=percentage)
        return products
