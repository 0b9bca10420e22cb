"""
Módulo de servicio para los likes sobre fotos y álbumes.
"""
import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session

from app.enums import LikeTargetType
from app.errors import ConflictError, ResourceNotFoundError
from app.services.access_policy import AccessPolicy
from app.services.pagination import CursorPager
from app.controllers.like_controller import LikeController
from app.controllers.photo_controller import PhotoController
from app.controllers.album_controller import AlbumController
from app.database.models.likes_model import LikeDatabaseModel
from app.schemas import (
    CursorPage,
    CursorPosition,
    LikeTarget,
    LikeResponse,
    LikedPhotoView,
    LikedAlbumView,
    MyLikeItem
)

class LikesService:
    """
    Registro de likes. Dar like es idempotente: un segundo intento sobre el mismo
    objetivo devuelve el like existente. Quitarlo también lo es.
    """
    def __init__(self, session: Session):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session
        self.like_controller = LikeController(session)
        self.photo_controller = PhotoController(session)
        self.album_controller = AlbumController(session)

    def _resolve_target(self, target: LikeTarget):
        if target.type == LikeTargetType.PHOTO:
            resource = self.photo_controller.get_by_id(target.id)
        else:
            resource = self.album_controller.get_album_by_id(target.id)

        if not resource:
            raise ResourceNotFoundError(
                message="Objetivo del like no encontrado",
                details={"target_type": str(target.type), "target_id": str(target.id)}
            )
        return resource

    def add_like(self, user_id: UUID, target: LikeTarget) -> LikeResponse:
        """
        Da like a una foto o un álbum.

        No se comprueba la existencia previa del like: se intenta el INSERT y, si
        la restricción de unicidad lo rechaza, se devuelve la fila ya existente.

        Args:
            user_id (UUID): Usuario que da el like.
            target (LikeTarget): Objetivo.

        Returns:
            LikeResponse: El like, nuevo o existente.

        Raises:
            ResourceNotFoundError: Si el objetivo no existe.
            PermissionDeniedError: Si el usuario no puede ver el objetivo.
        """
        resource = self._resolve_target(target)
        AccessPolicy.assert_can_view(user_id, resource)

        try:
            like = self.like_controller.create_like(user_id, target)
        except ConflictError:
            like = self.like_controller.get_by_target(user_id, target)
            if like is None:
                # La fila que provocó el conflicto ya no existe
                raise
            self.logger.info(f"Like repetido de {user_id} sobre {target.type} {target.id}, se devuelve el existente")

        return LikeResponse.model_validate(like)

    def remove_like(self, user_id: UUID, target: LikeTarget) -> bool:
        """
        Quita el like del usuario sobre el objetivo. Siempre devuelve True,
        exista o no el like.
        """
        removed = self.like_controller.delete_by_target(user_id, target)
        if removed > 1:
            self.logger.warning(f"Se eliminaron {removed} likes duplicados de {user_id} sobre {target.id}")
        return True

    @staticmethod
    def _to_item(like: LikeDatabaseModel) -> MyLikeItem:
        photo = LikedPhotoView.model_validate(like.photo) if like.target_type == LikeTargetType.PHOTO and like.photo else None
        album = LikedAlbumView.model_validate(like.album) if like.target_type == LikeTargetType.ALBUM and like.album else None
        return MyLikeItem(
            like_id=like.id,
            target_type=like.target_type,
            created_at=like.created_at,
            photo=photo,
            album=album
        )

    def list_my_likes(
        self,
        user_id: UUID,
        target_type: Optional[LikeTargetType] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None
    ) -> CursorPage[MyLikeItem]:
        """
        Lista los likes del usuario, los más recientes primero.

        Args:
            user_id (UUID): Usuario.
            target_type (Optional[LikeTargetType]): Filtro opcional por tipo.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.

        Returns:
            CursorPage[MyLikeItem]: Página de likes con la foto o el álbum resumido.
        """
        pager = CursorPager(limit=limit, cursor=cursor)
        page = pager.paginate(
            fetch=lambda after, n: self.like_controller.list_for_user(
                user_id, limit=n, after=after, target_type=target_type
            ),
            position_of=lambda like: CursorPosition(sort_value=like.created_at, id=like.id)
        )
        return CursorPage[MyLikeItem](
            items=[self._to_item(like) for like in page.items],
            next_cursor=page.next_cursor
        )
