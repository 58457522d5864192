"""Bird catalog router.

Listing and detail are public. Creating, editing, attaching images and
deleting require an admin session.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from aviary.core.exceptions import ValidationError
from aviary.core.response import DataResponse, ListResponse, paginated
from aviary.db.base import get_db
from aviary.dependencies import catalog_query, get_current_admin
from aviary.schemas.admin import AdminSession
from aviary.schemas.bird import BirdCreate, BirdOut, BirdUpdate
from aviary.services.bird import BirdService, bird_catalog
from aviary.services.catalog_query import QuerySpec
from aviary.services.uploads import ImageUploadBatch, new_image_batch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/birds", tags=["Birds"])


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> BirdService:
    return BirdService(session)


async def _collect(uploads: Optional[List[UploadFile]], batch: ImageUploadBatch) -> ImageUploadBatch:
    """Read each uploaded file into *batch*; empty file inputs are skipped."""
    for upload in uploads or []:
        if not upload.filename:
            continue
        batch.add(upload.filename, upload.content_type or "", await upload.read())
    return batch


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[BirdOut])
async def list_birds(
    query: QuerySpec = Depends(catalog_query(bird_catalog)),
    session: AsyncSession = Depends(get_db),
):
    """List birds. Filter with ?categories=&price=min+max, order with ?sortby=price+desc."""
    result = await _svc(session).list_birds(query)
    return paginated(result, BirdOut)


@router.get("/{bird_id}", response_model=DataResponse[BirdOut])
async def get_bird(
    bird_id: str,
    session: AsyncSession = Depends(get_db),
):
    bird = await _svc(session).get_bird(bird_id)
    return {"data": BirdOut.model_validate(bird)}


@router.post("", response_model=DataResponse[BirdOut], status_code=status.HTTP_201_CREATED)
async def create_bird(
    breed: str = Form(...),
    price: float = Form(...),
    age: Optional[float] = Form(default=None),
    gender: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    images: Optional[List[UploadFile]] = File(default=None),
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    """Create a bird from a multipart form with up to four images."""
    try:
        data = BirdCreate(
            breed=breed, price=price, age=age, gender=gender, description=description,
        )
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc

    batch = await _collect(images, new_image_batch())
    bird = await _svc(session).create_bird(data, batch)
    logger.info("Bird %s (%s) created by %s", bird.id, bird.breed, admin.username)
    return {"data": BirdOut.model_validate(bird)}


@router.put("/{bird_id}", response_model=DataResponse[BirdOut])
async def update_bird(
    bird_id: str,
    body: BirdUpdate,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    bird = await _svc(session).update_bird(bird_id, body)
    return {"data": BirdOut.model_validate(bird)}


@router.post("/{bird_id}/images", response_model=DataResponse[BirdOut])
async def add_bird_images(
    bird_id: str,
    images: List[UploadFile] = File(...),
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    """Attach more images, up to the per-bird limit."""
    svc = _svc(session)
    batch = await _collect(images, await svc.image_batch_for(bird_id))
    bird = await svc.add_images(bird_id, batch)
    return {"data": BirdOut.model_validate(bird)}


@router.delete("/{bird_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bird(
    bird_id: str,
    session: AsyncSession = Depends(get_db),
    admin: AdminSession = Depends(get_current_admin),
):
    await _svc(session).delete_bird(bird_id)
