"""
Módulo de servicio para la gestión de fotografías.
"""
import uuid
import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session

from app.settings import settings
from app.enums import Visibility
from app.utils.images import probe_image
from app.services.access_policy import AccessPolicy
from app.services.pagination import CursorPager
from app.services.membership_service import MembershipService
from app.services.storage_service import ObjectStore
from app.controllers.photo_controller import PhotoController
from app.database.models.photos_model import PhotoDatabaseModel
from app.schemas import CursorPage, CursorPosition, PhotoResponse, MembershipResponse
from app.errors import FourtogenicError, ResourceNotFoundError, StorageError

class PhotosService:
    """
    Servicio de alto nivel para el ciclo de vida de las fotos.
    Maneja la carga al almacenamiento de objetos, la visibilidad y el borrado.
    """
    def __init__(self, session: Session, object_store: ObjectStore):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session
        self.object_store = object_store

        self.photo_controller = PhotoController(session)
        self.membership_service = MembershipService(session)

    # =========== MÉTODOS PRIVADOS ===========
    def _get_existing(self, photo_id: UUID) -> PhotoDatabaseModel:
        photo = self.photo_controller.get_by_id(photo_id)
        if not photo:
            raise ResourceNotFoundError(message="Foto no encontrada", details={"photo_id": str(photo_id)})
        return photo

    def _discard_blob(self, key: Optional[str]) -> None:
        """Borrado del blob sin propagar fallos: un archivo huérfano no bloquea la operación."""
        if not key:
            return
        try:
            if not self.object_store.delete(key):
                self.logger.info(f"El objeto {key} ya no existía en el almacenamiento")
        except StorageError as e:
            self.logger.warning(f"No se pudo eliminar el objeto {key}: {e.message}")
        except Exception as e:
            self.logger.warning(f"No se pudo eliminar el objeto {key}: {e}", exc_info=True)

    # =========== MÉTODOS PARA SUBIR/CREAR ===========
    def upload_photo(
            self,
            owner_id: UUID,
            data: bytes,
            title: Optional[str] = None,
            description: Optional[str] = None,
            visibility: Visibility = Visibility.PRIVATE
        ) -> PhotoResponse:
        """
        Sube una foto al almacenamiento y registra sus datos.

        Args:
            owner_id (UUID): ID del propietario.
            data (bytes): Contenido del archivo.
            title (Optional[str]): Título.
            description (Optional[str]): Descripción opcional.
            visibility (Visibility): Visibilidad inicial, PRIVATE por defecto.

        Returns:
            PhotoResponse: El esquema de respuesta.

        Raises:
            ValidationError: Si el contenido no es una imagen soportada o es demasiado grande.
            StorageError: Si el almacenamiento rechaza el archivo.
        """
        image_format = probe_image(data, settings.MAX_UPLOAD_BYTES)
        key = f"photos/{owner_id}/{uuid.uuid4()}{image_format.extension}"

        file_url = self.object_store.put(key, data, image_format.content_type)

        new_photo = self.photo_controller.create_photo(
            owner_id=owner_id,
            file_url=file_url,
            storage_key=key,
            title=title,
            description=description,
            visibility=visibility
        )
        if not new_photo:
            # Rollback físico: el registro no existe, el archivo sobra
            self._discard_blob(key)
            raise FourtogenicError("Error inesperado al persistir la foto en base de datos")

        self.logger.info(f"Foto {new_photo.id} subida por {owner_id} ({image_format})")
        return PhotoResponse.model_validate(new_photo)

    # =========== MÉTODOS GET ===========
    def get_photo(self, photo_id: UUID, requester_id: Optional[UUID] = None) -> PhotoResponse:
        """
        Recupera una foto si el solicitante puede verla.

        Args:
            photo_id (UUID): ID de la foto.
            requester_id (Optional[UUID]): Solicitante, None si es anónimo.

        Returns:
            PhotoResponse: El esquema de respuesta.

        Raises:
            ResourceNotFoundError: Si la foto no existe.
            PermissionDeniedError: Si es PRIVATE y el solicitante no es el dueño.
        """
        photo = self._get_existing(photo_id)
        AccessPolicy.assert_can_view(requester_id, photo)
        return PhotoResponse.model_validate(photo)

    def list_my_photos(
        self,
        owner_id: UUID,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        visibility: Optional[Visibility] = None
    ) -> CursorPage[PhotoResponse]:
        """
        Recupera las fotos del usuario, las más recientes primero.

        Args:
            owner_id (UUID): ID del propietario.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.
            visibility (Optional[Visibility]): Filtro opcional.

        Returns:
            CursorPage[PhotoResponse]: Página de fotos.
        """
        pager = CursorPager(limit=limit, cursor=cursor)
        page = pager.paginate(
            fetch=lambda after, n: self.photo_controller.list_by_owner(
                owner_id, limit=n, after=after, visibility=visibility
            ),
            position_of=lambda photo: CursorPosition(sort_value=photo.created_at, id=photo.id)
        )
        return CursorPage[PhotoResponse](
            items=[PhotoResponse.model_validate(photo) for photo in page.items],
            next_cursor=page.next_cursor
        )

    # =========== MÉTODOS PATCH ===========
    def change_visibility(self, photo_id: UUID, actor_id: UUID, visibility: Visibility) -> PhotoResponse:
        """
        Cambia la visibilidad de una foto. Solo el propietario.

        Raises:
            ResourceNotFoundError: Si la foto no existe.
            PermissionDeniedError: Si el actor no es el dueño.
        """
        photo = self._get_existing(photo_id)
        AccessPolicy.assert_can_mutate(actor_id, photo)

        updated = self.photo_controller.update_visibility(photo, visibility)
        if not updated:
            raise FourtogenicError("No se pudo actualizar la visibilidad de la foto")
        return PhotoResponse.model_validate(updated)

    # =========== ÁLBUMES ===========
    def add_to_album(self, photo_id: UUID, album_id: UUID, actor_id: UUID) -> MembershipResponse:
        return self.membership_service.add(photo_id, album_id, actor_id)

    def remove_from_album(self, photo_id: UUID, album_id: UUID, actor_id: UUID) -> bool:
        return self.membership_service.remove(photo_id, album_id, actor_id)

    # =========== MÉTODOS DELETE ===========
    def delete_photo(self, photo_id: UUID, actor_id: UUID) -> bool:
        """
        Elimina una fotografía a petición de su propietario.

        Primero se borran los metadatos (membresías, likes y la foto) en una sola
        transacción; después se intenta borrar el archivo. Un fallo del
        almacenamiento se registra y no revierte el borrado.

        Args:
            photo_id (UUID): ID de la foto.
            actor_id (UUID): ID del usuario que solicita la eliminación.

        Returns:
            bool: True si se eliminó.

        Raises:
            ResourceNotFoundError: Si la foto no existe.
            PermissionDeniedError: Si el actor no es el dueño.
        """
        photo = self._get_existing(photo_id)
        AccessPolicy.assert_can_mutate(actor_id, photo)

        storage_key = photo.storage_key
        if not self.photo_controller.delete_photo(photo):
            raise FourtogenicError("No se pudo eliminar la foto", details={"photo_id": str(photo_id)})

        self._discard_blob(storage_key)
        self.logger.info(f"Foto {photo_id} eliminada por {actor_id}")
        return True
