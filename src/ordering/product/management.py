"""Product management commands and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.product.product import Product


@ordering.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    images = Text()  # JSON: list of image URLs
    category = String(max_length=100)
    count_in_stock = Integer(default=0, min_value=0)


@ordering.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    description = Text()
    price = Float(min_value=0.0)
    images = Text()  # JSON: list of image URLs
    category = String(max_length=100)
    count_in_stock = Integer(min_value=0)


@ordering.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


def _load_images(images):
    if images is None:
        return None
    return json.loads(images) if isinstance(images, str) else images


@ordering.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            images=_load_images(command.images),
            category=command.category,
            count_in_stock=command.count_in_stock or 0,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            images=_load_images(command.images),
            category=command.category,
            count_in_stock=command.count_in_stock,
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
