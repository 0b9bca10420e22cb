"""
Módulo de rutas para la gestión de álbumes.
"""
from uuid import UUID
from typing import Optional
from fastapi import APIRouter, status, Depends, Query

from app.enums import Visibility, AlbumPhotosSort
from app.services.albums_service import AlbumService
from app.api.dependencies import get_current_user_id, get_albums_service
from app.schemas import (
    CursorPage,
    AlbumResponse,
    AlbumCreate,
    AlbumWithPhotosResponse,
    SuccessResponse
)

router = APIRouter(prefix="/albums", tags=["Albums"])

# --- OPERACIONES DE COLECCIÓN ---

@router.post("", response_model=AlbumResponse, status_code=status.HTTP_201_CREATED)
def create_album(
    album_create: AlbumCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    album_service: AlbumService = Depends(get_albums_service)
):
    """Crea un nuevo álbum vacío."""
    return album_service.create_album(current_user_id, album_create)

@router.get("", response_model=CursorPage[AlbumResponse])
def get_albums(
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    visibility: Optional[Visibility] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    album_service: AlbumService = Depends(get_albums_service)
):
    """Lista los álbumes del usuario actual, paginados por cursor."""
    return album_service.list_my_albums(current_user_id, limit=limit, cursor=cursor, visibility=visibility)

# --- OPERACIONES DE RECURSO INDIVIDUAL ---

@router.get("/{album_id}", response_model=AlbumResponse)
def get_album_detail(
    album_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    album_service: AlbumService = Depends(get_albums_service)
):
    """Obtiene el detalle de un álbum si es PUBLIC o propio."""
    return album_service.get_album(album_id, current_user_id)

@router.delete("/{album_id}", response_model=SuccessResponse)
def delete_album(
    album_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    album_service: AlbumService = Depends(get_albums_service)
):
    """Elimina un álbum propio. Las fotos se conservan."""
    album_service.delete_album(album_id, current_user_id)
    return SuccessResponse()

@router.get("/{album_id}/photos", response_model=AlbumWithPhotosResponse)
def get_album_photos(
    album_id: UUID,
    sort: AlbumPhotosSort = Query(AlbumPhotosSort.RECENT),
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    album_service: AlbumService = Depends(get_albums_service)
):
    """
    Álbum y una página de sus fotos ordenadas por fecha de inclusión.
    Quien no es dueño solo ve las fotos PUBLIC.
    """
    return album_service.get_album_with_photos(
        album_id, current_user_id, sort=sort, limit=limit, cursor=cursor
    )
