"""Read queries over products used by the shop and the back-office."""

from storefront.catalogue.product import Product
from storefront.domain import storefront

_BATCH_SIZE = 100


@storefront.repository(part_of=Product)
class ProductRepository:
    def page(self, page: int = 1, limit: int = 8, category: str | None = None, featured: bool = False):
        """Return one page of products, newest first, and the total match count."""
        query = self._dao.query
        if category:
            query = query.filter(category=category)
        if featured:
            query = query.filter(is_featured=True)

        results = query.order_by("-created_at").offset((page - 1) * limit).limit(limit).all()
        return results.items, results.total

    def related_to(self, product: Product, limit: int = 4) -> list[Product]:
        """Other products in the same category, newest first."""
        results = (
            self._dao.query.filter(category=product.category)
            .exclude(id=product.id)
            .order_by("-created_at")
            .limit(limit)
            .all()
        )
        return results.items

    def all_products(self) -> list[Product]:
        products = []
        offset = 0
        while True:
            results = self._dao.query.order_by("-created_at").offset(offset).limit(_BATCH_SIZE).all()
            products.extend(results.items)
            offset += _BATCH_SIZE
            if offset >= results.total:
                return products
