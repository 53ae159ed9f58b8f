"""Repository for the Product aggregate."""

from ecommerce.domain import ecommerce
from ecommerce.product.product import Product


@ecommerce.repository(part_of=Product)
class ProductRepository:
    def create(self, product: Product) -> None:
        self.add(product)

    def update(self, product: Product) -> None:
        self.get(product.id)
        self.add(product)

    def find(self, product_id: str) -> Product:
        return self.get(product_id)

    def find_all(self) -> list[Product]:
        return self._dao.query.all().items
