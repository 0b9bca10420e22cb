"""
Módulo de servicio para la relación foto <-> álbum.
"""
import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session

from app.enums import AlbumPhotosSort
from app.errors import FourtogenicError, ResourceNotFoundError
from app.services.access_policy import AccessPolicy
from app.services.pagination import CursorPager
from app.controllers.photo_controller import PhotoController
from app.controllers.album_controller import AlbumController
from app.controllers.membership_controller import MembershipController
from app.database.models.albums_model import AlbumDatabaseModel
from app.database.models.photos_model import PhotoDatabaseModel
from app.schemas import CursorPage, CursorPosition, MembershipResponse, PhotoResponse

class MembershipService:
    """
    Mantiene la relación N:N entre fotos y álbumes.
    """
    def __init__(self, session: Session):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session
        self.photo_controller = PhotoController(session)
        self.album_controller = AlbumController(session)
        self.membership_controller = MembershipController(session)

    # =========== MÉTODOS PRIVADOS ===========
    def _resolve_pair(self, photo_id: UUID, album_id: UUID) -> tuple[PhotoDatabaseModel, AlbumDatabaseModel]:
        photo = self.photo_controller.get_by_id(photo_id)
        if not photo:
            raise ResourceNotFoundError(message="Foto no encontrada", details={"photo_id": str(photo_id)})

        album = self.album_controller.get_album_by_id(album_id)
        if not album:
            raise ResourceNotFoundError(message="Álbum no encontrado", details={"album_id": str(album_id)})

        return photo, album

    def _assert_owns_both(self, actor_id: UUID, photo: PhotoDatabaseModel, album: AlbumDatabaseModel) -> None:
        details = {"photo_id": str(photo.id), "album_id": str(album.id)}
        AccessPolicy.assert_can_mutate(actor_id, photo, details)
        AccessPolicy.assert_can_mutate(actor_id, album, details)

    # =========== ALTA Y BAJA ===========
    def add(self, photo_id: UUID, album_id: UUID, actor_id: UUID) -> MembershipResponse:
        """
        Añade una foto a un álbum.

        Args:
            photo_id (UUID): ID de la foto.
            album_id (UUID): ID del álbum.
            actor_id (UUID): Usuario que realiza la operación.

        Returns:
            MembershipResponse: La membresía creada.

        Raises:
            ResourceNotFoundError: Si la foto o el álbum no existen.
            PermissionDeniedError: Si el actor no es dueño de ambos.
            ConflictError: Si la foto ya estaba en el álbum.
        """
        photo, album = self._resolve_pair(photo_id, album_id)
        self._assert_owns_both(actor_id, photo, album)

        membership = self.membership_controller.create_membership(photo.id, album.id)
        self.logger.info(f"Foto {photo.id} añadida al álbum {album.id}")
        return MembershipResponse.model_validate(membership)

    def remove(self, photo_id: UUID, album_id: UUID, actor_id: UUID) -> bool:
        """
        Quita una foto de un álbum sin eliminarla.

        Raises:
            ResourceNotFoundError: Si la foto, el álbum o la membresía no existen.
            PermissionDeniedError: Si el actor no es dueño de ambos.
            FourtogenicError: Si el borrado falla en la base de datos.
        """
        photo, album = self._resolve_pair(photo_id, album_id)
        self._assert_owns_both(actor_id, photo, album)

        membership = self.membership_controller.get_by_pair(photo.id, album.id)
        if not membership:
            raise ResourceNotFoundError(
                message="La foto no pertenece al álbum",
                details={"photo_id": str(photo.id), "album_id": str(album.id)}
            )

        if not self.membership_controller.delete_membership(membership):
            raise FourtogenicError(
                "No se pudo quitar la foto del álbum",
                details={"photo_id": str(photo.id), "album_id": str(album.id)}
            )

        self.logger.info(f"Foto {photo.id} removida del álbum {album.id}")
        return True

    # =========== CONSULTAS ===========
    def list_photos_in_album(
        self,
        album: AlbumDatabaseModel,
        requester_id: Optional[UUID],
        sort: AlbumPhotosSort = AlbumPhotosSort.RECENT,
        limit: Optional[int] = None,
        cursor: Optional[str] = None
    ) -> CursorPage[PhotoResponse]:
        """
        Lista las fotos de un álbum visible para el solicitante.

        Quien no es dueño del álbum solo recibe las fotos PUBLIC, sea cual sea la
        visibilidad del álbum.

        Args:
            album (AlbumDatabaseModel): Álbum ya resuelto.
            requester_id (Optional[UUID]): Solicitante, None si es anónimo.
            sort (AlbumPhotosSort): recent u oldest, por fecha de inclusión.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.

        Returns:
            CursorPage[PhotoResponse]: Página de fotos.

        Raises:
            PermissionDeniedError: Si el solicitante no puede ver el álbum.
        """
        AccessPolicy.assert_can_view(requester_id, album)
        public_only = not AccessPolicy.can_mutate(requester_id, album.owner_id)

        pager = CursorPager(limit=limit, cursor=cursor)
        page = pager.paginate(
            fetch=lambda after, n: self.membership_controller.list_album_photos(
                album.id, direction=sort.direction, limit=n, after=after, public_only=public_only
            ),
            position_of=lambda row: CursorPosition(sort_value=row[0].added_at, id=row[0].id)
        )
        return CursorPage[PhotoResponse](
            items=[PhotoResponse.model_validate(photo) for _, photo in page.items],
            next_cursor=page.next_cursor
        )
