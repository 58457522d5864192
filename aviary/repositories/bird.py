from aviary.domain.bird import Bird
from aviary.repositories.base import BaseRepository


class BirdRepository(BaseRepository[Bird]):
    model = Bird
    default_order = "breed"
