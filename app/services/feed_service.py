"""
Feed público de fotos.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.enums import FeedSort
from app.services.pagination import CursorPager
from app.controllers.photo_controller import PhotoController
from app.schemas import CursorPage, CursorPosition, FeedPhotoResponse

class FeedService:
    """
    Lista las fotos PUBLIC de todos los usuarios.
    """
    def __init__(self, session: Session):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.photo_controller = PhotoController(session)

    def public_feed(
        self,
        sort: FeedSort = FeedSort.LATEST,
        limit: Optional[int] = None,
        cursor: Optional[str] = None
    ) -> CursorPage[FeedPhotoResponse]:
        """
        Página del feed público.

        Con sort=likes el orden es por número de likes descendente y, a igualdad,
        por id ascendente. Los likes cambian entre páginas, así que un recorrido
        completo puede no reflejar un único instante.

        Args:
            sort (FeedSort): latest o likes.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.

        Returns:
            CursorPage[FeedPhotoResponse]: Fotos con su número de likes.
        """
        pager = CursorPager(limit=limit, cursor=cursor)

        if sort == FeedSort.LIKES:
            position_of = lambda row: CursorPosition(sort_value=row[1], id=row[0].id)
        else:
            position_of = lambda row: CursorPosition(sort_value=row[0].created_at, id=row[0].id)

        page = pager.paginate(
            fetch=lambda after, n: self.photo_controller.list_public_feed(sort, limit=n, after=after),
            position_of=position_of
        )
        return CursorPage[FeedPhotoResponse](
            items=[
                FeedPhotoResponse(
                    id=photo.id,
                    owner_id=photo.owner_id,
                    file_url=photo.file_url,
                    title=photo.title,
                    created_at=photo.created_at,
                    likes_count=likes_count
                )
                for photo, likes_count in page.items
            ],
            next_cursor=page.next_cursor
        )
