from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, EmailStr

class UserCreate(BaseModel):
    """
    Esquema para registro: aquí sí pedimos el password plano.

    Args:
        email (EmailStr): Dirección de correo electrónico.
        username (str): Nombre de usuario.
        password (str): Contraseña.
        display_name (Optional[str]): Nombre visible.
    """
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8, max_length=72)
    display_name: Optional[str] = Field(None, max_length=100)

class ProfileStats(BaseModel):
    """
    Estadísticas de contenido de un usuario.

    Args:
        photo_count (int): Fotos subidas por el usuario.
        received_like_count (int): Likes recibidos en sus fotos.
    """
    photo_count: int = 0
    received_like_count: int = 0

class UserResponse(BaseModel):
    """
    Esquema de respuesta seguro: sin contraseñas.
    """
    id: UUID
    email: EmailStr
    username: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class PublicProfileResponse(ProfileStats):
    """
    Perfil público de un usuario con sus estadísticas. No expone el email.
    """
    id: UUID
    username: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class MyProfileResponse(PublicProfileResponse):
    """Perfil propio: igual que el público pero con el email."""
    email: EmailStr

class ProfileUpdate(BaseModel):
    """
    Esquema para actualizar el perfil.

    Args:
        display_name (Optional[str]): Nombre visible.
        bio (Optional[str]): Biografía.
        avatar_url (Optional[str]): URL del avatar (si no se sube archivo).
    """
    display_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = None
