"""
Membership controller: aristas foto <-> álbum.
"""
import logging
from uuid import UUID
from typing import Optional, List, Tuple
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.enums import Visibility, SortDirection
from app.controllers.base_controller import BaseController
from app.database.models.photos_model import PhotoDatabaseModel
from app.database.models.memberships_model import MembershipDatabaseModel
from app.schemas.pagination_schemas import CursorPosition

class MembershipController(BaseController):
    """
    Controlador de la tabla album_photos.
    """
    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create_membership(self, photo_id: UUID, album_id: UUID) -> MembershipDatabaseModel:
        """
        Inserta la relación entre una foto y un álbum.

        Args:
            photo_id (UUID): ID de la foto.
            album_id (UUID): ID del álbum.

        Returns:
            MembershipDatabaseModel: La membresía creada.

        Raises:
            ConflictError: Si la foto ya pertenece al álbum.
        """
        membership = MembershipDatabaseModel(
            photo_id=self._validate_uuid(photo_id),
            album_id=self._validate_uuid(album_id)
        )
        return self._insert_or_conflict(membership)

    def get_by_pair(self, photo_id: UUID, album_id: UUID) -> Optional[MembershipDatabaseModel]:
        """Busca la membresía de una foto en un álbum."""
        stmt = select(MembershipDatabaseModel).where(
            MembershipDatabaseModel.photo_id == self._validate_uuid(photo_id),
            MembershipDatabaseModel.album_id == self._validate_uuid(album_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def delete_membership(self, membership: MembershipDatabaseModel) -> bool:
        return self._delete_or_rollback(membership)

    def list_album_photos(
        self,
        album_id: UUID,
        direction: SortDirection,
        limit: int,
        after: Optional[CursorPosition] = None,
        public_only: bool = False
    ) -> List[Tuple[MembershipDatabaseModel, PhotoDatabaseModel]]:
        """
        Lista las fotos de un álbum ordenadas por fecha de inclusión.

        El desempate es el id de la membresía, no el de la foto.

        Args:
            album_id (UUID): ID del álbum.
            direction (SortDirection): asc (más antiguas primero) o desc.
            limit (int): Máximo de filas.
            after (Optional[CursorPosition]): Posición desde la que continuar.
            public_only (bool): True para devolver solo fotos PUBLIC.

        Returns:
            List[Tuple[MembershipDatabaseModel, PhotoDatabaseModel]]: Pares (membresía, foto).
        """
        stmt = (
            select(MembershipDatabaseModel, PhotoDatabaseModel)
            .join(PhotoDatabaseModel, MembershipDatabaseModel.photo_id == PhotoDatabaseModel.id)
            .where(MembershipDatabaseModel.album_id == self._validate_uuid(album_id))
        )
        if public_only:
            stmt = stmt.where(PhotoDatabaseModel.visibility == Visibility.PUBLIC)

        rows = self._list_ordered(
            stmt,
            sort_column=MembershipDatabaseModel.added_at,
            id_column=MembershipDatabaseModel.id,
            direction=direction,
            limit=limit,
            after=after,
            scalars=False
        )
        return [(row[0], row[1]) for row in rows]
