"""
Módulo de rutas del feed público.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.enums import FeedSort
from app.services.feed_service import FeedService
from app.api.dependencies import get_feed_service
from app.schemas import CursorPage, FeedPhotoResponse

router = APIRouter(prefix="/feed", tags=["Feed"])

@router.get("/public", response_model=CursorPage[FeedPhotoResponse])
def get_public_feed(
    sort: FeedSort = Query(FeedSort.LATEST),
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    feed_service: FeedService = Depends(get_feed_service)
):
    """Fotos PUBLIC de todos los usuarios, por recientes o por likes."""
    return feed_service.public_feed(sort=sort, limit=limit, cursor=cursor)
