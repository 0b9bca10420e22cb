"""
Album controller module for database CRUD operations.
"""
import logging
from uuid import UUID
from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.enums import Visibility, SortDirection
from app.controllers.base_controller import BaseController
from app.database.models.albums_model import AlbumDatabaseModel
from app.database.models.likes_model import LikeDatabaseModel
from app.database.models.memberships_model import MembershipDatabaseModel
from app.schemas import AlbumCreate
from app.schemas.pagination_schemas import CursorPosition

class AlbumController(BaseController):
    """
    Controlador para la gestión de operaciones de base de datos de albumes.
    """
    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create_album(self, owner_id: UUID, album_data: AlbumCreate) -> Optional[AlbumDatabaseModel]:
        """
        Crea un nuevo álbum para un usuario.

        Args:
            owner_id (UUID): ID del propietario.
            album_data (AlbumCreate): Datos del nuevo álbum.

        Returns:
            Optional[AlbumDatabaseModel]: El modelo del álbum creado o None.
        """
        new_album = AlbumDatabaseModel(
            owner_id=self._validate_uuid(owner_id),
            title=album_data.title,
            description=album_data.description,
            visibility=album_data.visibility
        )

        if not self._commit_or_rollback(new_album):
            return None

        self.session.refresh(new_album)
        return new_album

    def get_album_by_id(self, album_id: UUID) -> Optional[AlbumDatabaseModel]:
        """
        Recupera un álbum por su ID.

        Args:
            album_id (UUID): ID del álbum.

        Returns:
            Optional[AlbumDatabaseModel]: El álbum o None.
        """
        return self._get_item_by_id(AlbumDatabaseModel, album_id)

    def list_by_owner(
        self,
        owner_id: UUID,
        limit: int,
        after: Optional[CursorPosition] = None,
        visibility: Optional[Visibility] = None
    ) -> List[AlbumDatabaseModel]:
        """
        Lista los álbumes de un usuario, los más recientes primero.

        Args:
            owner_id (UUID): ID del propietario.
            limit (int): Máximo de filas.
            after (Optional[CursorPosition]): Posición desde la que continuar.
            visibility (Optional[Visibility]): Filtro opcional de visibilidad.

        Returns:
            List[AlbumDatabaseModel]: Álbumes en orden.
        """
        stmt = select(AlbumDatabaseModel).where(AlbumDatabaseModel.owner_id == self._validate_uuid(owner_id))
        if visibility is not None:
            stmt = stmt.where(AlbumDatabaseModel.visibility == visibility)

        return self._list_ordered(
            stmt,
            sort_column=AlbumDatabaseModel.created_at,
            id_column=AlbumDatabaseModel.id,
            direction=SortDirection.DESC,
            limit=limit,
            after=after
        )

    def delete_album(self, album: AlbumDatabaseModel) -> bool:
        """
        Elimina el álbum. Primero se borran sus membresías y los likes que lo
        tienen como objetivo, todo dentro de la misma transacción.

        Args:
            album (AlbumDatabaseModel): Álbum a eliminar.

        Returns:
            bool: True si la eliminación fue exitosa, False en caso contrario.
        """
        try:
            removed = self.session.execute(
                delete(MembershipDatabaseModel).where(MembershipDatabaseModel.album_id == album.id)
            ).rowcount
            self.session.execute(
                delete(LikeDatabaseModel).where(LikeDatabaseModel.album_id == album.id)
            )
            self.session.delete(album)
            self.session.commit()
            self.logger.info(f"Álbum {album.id} eliminado junto con {removed} membresías")
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"Error al eliminar álbum {album.id}: {e}")
            return False
