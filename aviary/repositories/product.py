from aviary.domain.product import Product
from aviary.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product
    default_order = "name"
