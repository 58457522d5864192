"""Bird service — catalog listing, CRUD and image attachment."""


from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.config import settings
from aviary.core.exceptions import NotFoundError, UploadRejectedError
from aviary.domain.bird import Bird
from aviary.repositories.bird import BirdRepository
from aviary.schemas.bird import BirdCreate, BirdUpdate
from aviary.services.catalog_query import CatalogQueryPipeline, PageResult, QuerySpec
from aviary.services.uploads import ImageUploadBatch, discard_stored, new_image_batch

# Public ``sortby`` field -> Bird attribute
BIRD_SORT_FIELDS = {
    "price": "price",
    "breed": "breed",
    "category": "breed",
    "age": "age",
}

bird_catalog = CatalogQueryPipeline(
    category_field="breed",
    sort_fields=BIRD_SORT_FIELDS,
    page_size=settings.catalog_page_size,
)

class BirdService:
    def __init__(self, session: AsyncSession, upload_dir: Path | None = None):
        self._repo = BirdRepository(session)
        self._upload_dir = upload_dir or Path(settings.upload_dir)

    async def list_birds(self, query: QuerySpec) -> PageResult:
        birds = await self._repo.find_all()
        return bird_catalog.run(birds, query)

    async def get_bird(self, bird_id: str) -> Bird:
        bird = await self._repo.find_by_id(bird_id)
        if not bird:
            raise NotFoundError("Bird", bird_id)
        return bird

    async def create_bird(self, data: BirdCreate, images: ImageUploadBatch | None = None) -> Bird:
        urls = images.write_to(self._upload_dir) if images else []
        bird = Bird(**data.model_dump(exclude_none=True), images=urls)
        return await self._save_or_discard(bird, urls)

    async def update_bird(self, bird_id: str, data: BirdUpdate) -> Bird:
        bird = await self.get_bird(bird_id)
        for name, value in data.model_dump(exclude_none=True, exclude_unset=True).items():
            setattr(bird, name, value)
        return await self._repo.save(bird)

    async def image_batch_for(self, bird_id: str) -> ImageUploadBatch:
        """A batch sized to the image slots the bird has left."""
        bird = await self.get_bird(bird_id)
        remaining = settings.max_images_per_bird - len(bird.images or [])
        if remaining <= 0:
            raise UploadRejectedError(
                f"Bird already has the maximum of {settings.max_images_per_bird} images",
                status_code=413,
            )
        return new_image_batch(capacity=remaining)

    async def add_images(self, bird_id: str, images: ImageUploadBatch) -> Bird:
        bird = await self.get_bird(bird_id)
        urls = images.write_to(self._upload_dir)
        # Reassign rather than append so the JSON column is flagged dirty
        bird.images = [*(bird.images or []), *urls]
        return await self._save_or_discard(bird, urls)

    async def _save_or_discard(self, bird: Bird, new_urls: list[str]) -> Bird:
        """Save *bird*; files written for this request are removed if that fails."""
        try:
            return await self._repo.save(bird)
        except Exception:
            discard_stored(self._upload_dir, new_urls)
            raise

    async def delete_bird(self, bird_id: str) -> None:
        deleted = await self._repo.delete(bird_id)
        if not deleted:
            raise NotFoundError("Bird", bird_id)
