"""Product service — catalog listing and CRUD."""


from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.config import settings
from aviary.core.exceptions import NotFoundError
from aviary.domain.product import Product
from aviary.repositories.product import ProductRepository
from aviary.schemas.product import ProductCreate, ProductUpdate
from aviary.services.catalog_query import CatalogQueryPipeline, PageResult, QuerySpec

PRODUCT_SORT_FIELDS = {
    "price": "price",
    "name": "name",
    "category": "category",
}

product_catalog = CatalogQueryPipeline(
    category_field="category",
    sort_fields=PRODUCT_SORT_FIELDS,
    page_size=settings.catalog_page_size,
)

class ProductService:
    def __init__(self, session: AsyncSession):
        self._repo = ProductRepository(session)

    async def list_products(self, query: QuerySpec) -> PageResult:
        products = await self._repo.find_all()
        return product_catalog.run(products, query)

    async def get_product(self, product_id: str) -> Product:
        product = await self._repo.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product", product_id)
        return product

    async def create_product(self, data: ProductCreate) -> Product:
        return await self._repo.save(Product(**data.model_dump(exclude_none=True)))

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        product = await self.get_product(product_id)
        for name, value in data.model_dump(exclude_none=True, exclude_unset=True).items():
            setattr(product, name, value)
        return await self._repo.save(product)

    async def delete_product(self, product_id: str) -> None:
        deleted = await self._repo.delete(product_id)
        if not deleted:
            raise NotFoundError("Product", product_id)
