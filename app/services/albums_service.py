"""
Módulo de servicio para la gestión de albumes de fotos de un usuario.
"""
import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session

from app.enums import Visibility, AlbumPhotosSort
from app.services.access_policy import AccessPolicy
from app.services.pagination import CursorPager
from app.services.membership_service import MembershipService
from app.controllers.album_controller import AlbumController
from app.database.models.albums_model import AlbumDatabaseModel
from app.errors import FourtogenicError, ResourceNotFoundError
from app.schemas import (
    CursorPage,
    CursorPosition,
    AlbumResponse,
    AlbumCreate,
    AlbumWithPhotosResponse
)

class AlbumService:
    """
    Servicio de alto nivel para el ciclo de vida de los álbumes.
    """
    def __init__(self, session: Session):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session

        self.album_controller = AlbumController(session)
        self.membership_service = MembershipService(session)

    # =========== MÉTODOS PRIVADOS ===========
    def _get_existing(self, album_id: UUID) -> AlbumDatabaseModel:
        album = self.album_controller.get_album_by_id(album_id)
        if not album:
            raise ResourceNotFoundError(
                message="Album no encontrado.",
                details={"album_id": str(album_id)}
            )
        return album

    # =========== MÉTODOS POST ===========
    def create_album(self, owner_id: UUID, album_data: AlbumCreate) -> AlbumResponse:
        """
        Crea un nuevo álbum.

        Args:
            owner_id (UUID): ID del propietario.
            album_data (AlbumCreate): Título, descripción y visibilidad.

        Returns:
            AlbumResponse: El álbum creado.
        """
        album = self.album_controller.create_album(owner_id, album_data)
        if not album:
            raise FourtogenicError("Error al crear el álbum")

        self.logger.info(f"Álbum {album.id} creado por {owner_id}")
        return AlbumResponse.model_validate(album)

    # =========== MÉTODOS GET ===========
    def get_album(self, album_id: UUID, requester_id: Optional[UUID]) -> AlbumResponse:
        """
        Recupera un álbum si el solicitante puede verlo.

        Raises:
            ResourceNotFoundError: Si el álbum no existe.
            PermissionDeniedError: Si es PRIVATE y el solicitante no es el dueño.
        """
        album = self._get_existing(album_id)
        AccessPolicy.assert_can_view(requester_id, album)
        return AlbumResponse.model_validate(album)

    def list_my_albums(
        self,
        owner_id: UUID,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        visibility: Optional[Visibility] = None
    ) -> CursorPage[AlbumResponse]:
        """
        Recupera los álbumes de un usuario, los más recientes primero.

        Args:
            owner_id (UUID): ID del propietario.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.
            visibility (Optional[Visibility]): Filtro opcional.

        Returns:
            CursorPage[AlbumResponse]: Página de álbumes.
        """
        pager = CursorPager(limit=limit, cursor=cursor)
        page = pager.paginate(
            fetch=lambda after, n: self.album_controller.list_by_owner(
                owner_id, limit=n, after=after, visibility=visibility
            ),
            position_of=lambda album: CursorPosition(sort_value=album.created_at, id=album.id)
        )
        return CursorPage[AlbumResponse](
            items=[AlbumResponse.model_validate(album) for album in page.items],
            next_cursor=page.next_cursor
        )

    def get_album_with_photos(
        self,
        album_id: UUID,
        requester_id: Optional[UUID],
        sort: AlbumPhotosSort = AlbumPhotosSort.RECENT,
        limit: Optional[int] = None,
        cursor: Optional[str] = None
    ) -> AlbumWithPhotosResponse:
        """
        Devuelve el álbum junto con una página de sus fotos.

        Args:
            album_id (UUID): ID del álbum.
            requester_id (Optional[UUID]): Solicitante.
            sort (AlbumPhotosSort): recent u oldest.
            limit (Optional[int]): Tamaño de página.
            cursor (Optional[str]): Cursor de la página anterior.

        Returns:
            AlbumWithPhotosResponse: Álbum, fotos y cursor siguiente.
        """
        album = self._get_existing(album_id)
        AccessPolicy.assert_can_view(requester_id, album)

        page = self.membership_service.list_photos_in_album(
            album, requester_id, sort=sort, limit=limit, cursor=cursor
        )
        return AlbumWithPhotosResponse(
            album=AlbumResponse.model_validate(album),
            items=page.items,
            next_cursor=page.next_cursor
        )

    # =========== MÉTODOS DELETE ===========
    def delete_album(self, album_id: UUID, actor_id: UUID) -> bool:
        """
        Elimina un álbum a petición de su propietario. Las fotos no se tocan,
        solo sus membresías.

        Raises:
            ResourceNotFoundError: Si el álbum no existe.
            PermissionDeniedError: Si el actor no es el dueño.
        """
        album = self._get_existing(album_id)
        AccessPolicy.assert_can_mutate(actor_id, album)

        if not self.album_controller.delete_album(album):
            raise FourtogenicError("No se pudo eliminar el álbum", details={"album_id": str(album_id)})
        return True
