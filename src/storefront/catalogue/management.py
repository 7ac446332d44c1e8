"""Back-office product management: add, update and remove."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product, load_labels
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=1000)
    image_urls = Text()  # JSON: list of URLs
    category = String(required=True, max_length=100)
    stock_quantity = Integer(default=0, min_value=0)
    is_featured = Boolean(default=False)
    sizes = Text()  # JSON: list of labels
    colors = Text()
    designs = Text()


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=1000)
    image_urls = Text()
    category = String(required=True, max_length=100)
    stock_quantity = Integer(default=0, min_value=0)
    is_featured = Boolean(default=False)
    sizes = Text()
    colors = Text()
    designs = Text()


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


def _editable_fields(command) -> dict:
    return {
        "name": command.name,
        "price": command.price,
        "category": command.category,
        "description": command.description,
        "image_url": command.image_url,
        "image_urls": load_labels(command.image_urls),
        "stock_quantity": command.stock_quantity,
        "is_featured": command.is_featured,
        "sizes": load_labels(command.sizes),
        "colors": load_labels(command.colors),
        "designs": load_labels(command.designs),
    }


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(**_editable_fields(command))
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(**_editable_fields(command))
        repo.add(product)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
