"""
Módulo de rutas para la gestión de usuarios (Autogestión y perfiles públicos).
"""
from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.services.users_service import UserService
from app.schemas import MyProfileResponse, PublicProfileResponse, ProfileUpdate
from app.api.dependencies import get_current_user_id, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("/me", response_model=MyProfileResponse)
def get_my_profile(
    current_user_id: UUID = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service)
):
    """Retorna el perfil del usuario autenticado con sus estadísticas."""
    return user_service.get_me(current_user_id)

@router.patch("/me", response_model=MyProfileResponse)
async def update_my_profile(
    display_name: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    avatar_url: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    current_user_id: UUID = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service)
):
    """
    Actualiza el perfil. Si se adjunta `avatar`, se sube al almacenamiento y su
    URL reemplaza a `avatar_url`.
    """
    fields = {"display_name": display_name, "bio": bio, "avatar_url": avatar_url}
    update_data = ProfileUpdate(**{key: value for key, value in fields.items() if value is not None})

    avatar_data = await avatar.read() if avatar is not None else None
    return user_service.update_me(
        current_user_id,
        update_data,
        avatar_data=avatar_data,
        avatar_filename=avatar.filename if avatar is not None else None
    )

@router.get("/{user_id}", response_model=PublicProfileResponse)
def get_public_profile(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service)
):
    """Perfil público de cualquier usuario, sin email."""
    return user_service.get_public_profile(user_id)
