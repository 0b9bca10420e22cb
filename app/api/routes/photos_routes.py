"""
Módulo de rutas para la gestión de fotografías.
"""
from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, UploadFile, File, Form, Query, status

from app.enums import Visibility
from app.services.photos_service import PhotosService
from app.api.dependencies import get_current_user_id, get_optional_user_id, get_photos_service
from app.schemas import (
    CursorPage,
    PhotoResponse,
    PhotoVisibilityUpdate,
    AddToAlbum,
    MembershipResponse,
    SuccessResponse
)

router = APIRouter(prefix="/photos", tags=["Photos"])

@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    file: UploadFile = File(...),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    visibility: Visibility = Form(Visibility.PRIVATE),
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """
    Sube una fotografía. El formato se detecta a partir del contenido.
    """
    data = await file.read()
    return photo_service.upload_photo(
        owner_id=current_user_id,
        data=data,
        title=title,
        description=description,
        visibility=visibility
    )

@router.get("", response_model=CursorPage[PhotoResponse])
def get_my_photos(
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    visibility: Optional[Visibility] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """
    Obtiene las fotos del usuario actual, paginadas por cursor.
    """
    return photo_service.list_my_photos(current_user_id, limit=limit, cursor=cursor, visibility=visibility)

@router.get("/{photo_id}", response_model=PhotoResponse)
def get_photo_detail(
    photo_id: UUID,
    requester_id: Optional[UUID] = Depends(get_optional_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """
    Obtiene una fotografía si es PUBLIC o pertenece al solicitante.
    """
    return photo_service.get_photo(photo_id, requester_id)

@router.delete("/{photo_id}", response_model=SuccessResponse)
def delete_photo(
    photo_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """Elimina una fotografía propia."""
    photo_service.delete_photo(photo_id, current_user_id)
    return SuccessResponse()

@router.post("/{photo_id}/albums", response_model=MembershipResponse, status_code=status.HTTP_201_CREATED)
def add_photo_to_album(
    photo_id: UUID,
    payload: AddToAlbum,
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """Añade la foto a un álbum. Ambos deben pertenecer al usuario."""
    return photo_service.add_to_album(photo_id, payload.album_id, current_user_id)

@router.delete("/{photo_id}/albums", response_model=SuccessResponse)
def remove_photo_from_album(
    photo_id: UUID,
    album_id: UUID = Query(...),
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """Quita la foto del álbum sin eliminarla."""
    photo_service.remove_from_album(photo_id, album_id, current_user_id)
    return SuccessResponse()

@router.patch("/{photo_id}/visibility", response_model=PhotoResponse)
def change_photo_visibility(
    photo_id: UUID,
    payload: PhotoVisibilityUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    photo_service: PhotosService = Depends(get_photos_service)
):
    """Cambia la visibilidad de una foto propia."""
    return photo_service.change_visibility(photo_id, current_user_id, payload.visibility)
