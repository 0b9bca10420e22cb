"""
Like controller: persistencia del registro de likes.
"""
import logging
from uuid import UUID
from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload

from app.enums import LikeTargetType, SortDirection
from app.controllers.base_controller import BaseController
from app.database.models.likes_model import LikeDatabaseModel
from app.schemas.likes_schemas import LikeTarget
from app.schemas.pagination_schemas import CursorPosition

class LikeController(BaseController):
    """
    Controlador de la tabla likes. Todas las consultas por objetivo reciben un
    LikeTarget, que decide qué columna (photo_id o album_id) se usa.
    """
    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _target_filter(self, user_id: UUID, target: LikeTarget):
        column = LikeDatabaseModel.photo_id if target.type == LikeTargetType.PHOTO else LikeDatabaseModel.album_id
        return (
            LikeDatabaseModel.user_id == self._validate_uuid(user_id),
            LikeDatabaseModel.target_type == target.type,
            column == target.id
        )

    def create_like(self, user_id: UUID, target: LikeTarget) -> LikeDatabaseModel:
        """
        Inserta un like.

        Args:
            user_id (UUID): Usuario que da el like.
            target (LikeTarget): Objetivo del like.

        Returns:
            LikeDatabaseModel: El like creado.

        Raises:
            ConflictError: Si el usuario ya tenía like sobre ese objetivo.
        """
        like = LikeDatabaseModel(
            user_id=self._validate_uuid(user_id),
            target_type=target.type,
            photo_id=target.photo_id,
            album_id=target.album_id
        )
        return self._insert_or_conflict(like)

    def get_by_target(self, user_id: UUID, target: LikeTarget) -> Optional[LikeDatabaseModel]:
        """Devuelve el like del usuario sobre el objetivo, si existe."""
        stmt = (
            select(LikeDatabaseModel)
            .where(*self._target_filter(user_id, target))
            .order_by(LikeDatabaseModel.created_at.asc(), LikeDatabaseModel.id.asc())
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def delete_by_target(self, user_id: UUID, target: LikeTarget) -> int:
        """
        Elimina todos los likes del usuario sobre el objetivo.

        Returns:
            int: Número de filas eliminadas.
        """
        result = self.session.execute(
            delete(LikeDatabaseModel).where(*self._target_filter(user_id, target))
        )
        self.session.commit()
        self.logger.info(f"Eliminados {result.rowcount} likes de {user_id} sobre {target.type} {target.id}")
        return result.rowcount

    def list_for_user(
        self,
        user_id: UUID,
        limit: int,
        after: Optional[CursorPosition] = None,
        target_type: Optional[LikeTargetType] = None
    ) -> List[LikeDatabaseModel]:
        """
        Lista los likes de un usuario, los más recientes primero, con su foto o
        álbum ya cargados.

        Args:
            user_id (UUID): ID del usuario.
            limit (int): Máximo de filas.
            after (Optional[CursorPosition]): Posición desde la que continuar.
            target_type (Optional[LikeTargetType]): Filtro opcional por tipo.

        Returns:
            List[LikeDatabaseModel]: Likes en orden.
        """
        stmt = (
            select(LikeDatabaseModel)
            .where(LikeDatabaseModel.user_id == self._validate_uuid(user_id))
            .options(selectinload(LikeDatabaseModel.photo), selectinload(LikeDatabaseModel.album))
        )
        if target_type is not None:
            stmt = stmt.where(LikeDatabaseModel.target_type == target_type)

        return self._list_ordered(
            stmt,
            sort_column=LikeDatabaseModel.created_at,
            id_column=LikeDatabaseModel.id,
            direction=SortDirection.DESC,
            limit=limit,
            after=after
        )
