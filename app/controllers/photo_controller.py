"""
Photo controller module for database CRUD operations.
"""
import logging
from uuid import UUID
from typing import Optional, List, Tuple
from sqlalchemy import select, delete, func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.enums import Visibility, SortDirection, FeedSort
from app.controllers.base_controller import BaseController
from app.database.models.photos_model import PhotoDatabaseModel
from app.database.models.likes_model import LikeDatabaseModel
from app.database.models.memberships_model import MembershipDatabaseModel
from app.schemas.pagination_schemas import CursorPosition

class PhotoController(BaseController):
    """
    Controlador para la gestión de operaciones de base de datos de fotos.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def likes_count_expression():
        """Subconsulta correlacionada con el número de likes de cada foto."""
        return (
            select(func.count(LikeDatabaseModel.id))
            .where(LikeDatabaseModel.photo_id == PhotoDatabaseModel.id)
            .correlate(PhotoDatabaseModel)
            .scalar_subquery()
        )

    def create_photo(
        self,
        owner_id: UUID,
        file_url: str,
        storage_key: Optional[str],
        title: Optional[str],
        description: Optional[str],
        visibility: Visibility
    ) -> Optional[PhotoDatabaseModel]:
        """
        Crea el registro de una foto ya almacenada.

        Args:
            owner_id (UUID): ID del propietario.
            file_url (str): URL pública del archivo.
            storage_key (Optional[str]): Clave del objeto en el almacenamiento.
            title (Optional[str]): Título.
            description (Optional[str]): Descripción.
            visibility (Visibility): Visibilidad inicial.

        Returns:
            Optional[PhotoDatabaseModel]: La foto creada o None si falla la persistencia.
        """
        db_photo = PhotoDatabaseModel(
            owner_id=self._validate_uuid(owner_id),
            file_url=file_url,
            storage_key=storage_key,
            title=title,
            description=description,
            visibility=visibility
        )

        if not self._commit_or_rollback(db_photo):
            return None

        self.session.refresh(db_photo)
        return db_photo

    def get_by_id(self, photo_id: UUID) -> Optional[PhotoDatabaseModel]:
        """
        Recupera una foto por su ID.

        Args:
            photo_id (UUID): ID de la foto.

        Returns:
            Optional[PhotoDatabaseModel]: La foto o None.
        """
        return self._get_item_by_id(PhotoDatabaseModel, photo_id)

    def list_by_owner(
        self,
        owner_id: UUID,
        limit: int,
        after: Optional[CursorPosition] = None,
        visibility: Optional[Visibility] = None
    ) -> List[PhotoDatabaseModel]:
        """
        Lista las fotos de un usuario, las más recientes primero.

        Args:
            owner_id (UUID): ID del propietario.
            limit (int): Máximo de filas.
            after (Optional[CursorPosition]): Posición desde la que continuar.
            visibility (Optional[Visibility]): Filtro opcional de visibilidad.

        Returns:
            List[PhotoDatabaseModel]: Fotos en orden.
        """
        stmt = select(PhotoDatabaseModel).where(PhotoDatabaseModel.owner_id == self._validate_uuid(owner_id))
        if visibility is not None:
            stmt = stmt.where(PhotoDatabaseModel.visibility == visibility)

        return self._list_ordered(
            stmt,
            sort_column=PhotoDatabaseModel.created_at,
            id_column=PhotoDatabaseModel.id,
            direction=SortDirection.DESC,
            limit=limit,
            after=after
        )

    def list_public_feed(
        self,
        sort: FeedSort,
        limit: int,
        after: Optional[CursorPosition] = None
    ) -> List[Tuple[PhotoDatabaseModel, int]]:
        """
        Lista las fotos públicas junto con su número de likes.

        Args:
            sort (FeedSort): latest (fecha de subida) o likes (número de likes), ambos descendentes.
            limit (int): Máximo de filas.
            after (Optional[CursorPosition]): Posición desde la que continuar.

        Returns:
            List[Tuple[PhotoDatabaseModel, int]]: Pares (foto, likes) en orden.
        """
        likes_count = self.likes_count_expression()
        stmt = (
            select(PhotoDatabaseModel, likes_count.label("likes_count"))
            .where(PhotoDatabaseModel.visibility == Visibility.PUBLIC)
        )
        sort_column = likes_count if sort == FeedSort.LIKES else PhotoDatabaseModel.created_at

        rows = self._list_ordered(
            stmt,
            sort_column=sort_column,
            id_column=PhotoDatabaseModel.id,
            direction=SortDirection.DESC,
            limit=limit,
            after=after,
            scalars=False
        )
        return [(row[0], int(row[1] or 0)) for row in rows]

    def update_visibility(self, photo: PhotoDatabaseModel, visibility: Visibility) -> Optional[PhotoDatabaseModel]:
        """
        Cambia la visibilidad de una foto.

        Args:
            photo (PhotoDatabaseModel): Foto a actualizar.
            visibility (Visibility): Nueva visibilidad.

        Returns:
            Optional[PhotoDatabaseModel]: La foto actualizada o None.
        """
        photo.visibility = visibility
        if not self._update_or_rollback(photo):
            return None

        self.session.refresh(photo)
        return photo

    def delete_photo(self, photo: PhotoDatabaseModel) -> bool:
        """
        Elimina el registro de la foto junto con las membresías y likes que la referencian,
        todo en una misma transacción.

        Args:
            photo (PhotoDatabaseModel): Foto a eliminar.

        Returns:
            bool: True si la eliminación fue exitosa, False en caso contrario.
        """
        try:
            self.session.execute(
                delete(MembershipDatabaseModel).where(MembershipDatabaseModel.photo_id == photo.id)
            )
            self.session.execute(
                delete(LikeDatabaseModel).where(LikeDatabaseModel.photo_id == photo.id)
            )
            self.session.delete(photo)
            self.session.commit()
            self.logger.info(f"Successfully deleted: {photo}")
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"Error al eliminar la foto {photo.id}: {e}")
            return False
