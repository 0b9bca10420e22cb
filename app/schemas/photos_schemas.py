from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from app.enums import Visibility

class PhotoResponse(BaseModel):
    """
    Modelo de respuesta de una foto.

    Args:
        id (UUID): ID de la foto.
        owner_id (UUID): ID del propietario.
        file_url (str): URL pública del archivo.
        title (Optional[str]): Título.
        description (Optional[str]): Descripción.
        visibility (Visibility): PUBLIC o PRIVATE.
        created_at (datetime): Fecha de subida.
    """
    id: UUID
    owner_id: UUID
    file_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    visibility: Visibility
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "xxxx-xxxx-xxxx-xxxx",
                    "owner_id": "xxxx-xxxx-xxxx-xxxx",
                    "file_url": "/uploads/photos/xxxx/xxxx.jpg",
                    "title": "Vacaciones de verano",
                    "description": "Foto en la playa",
                    "visibility": "PRIVATE",
                    "created_at": "2025-01-01T00:00:00"
                }
            ]
        }
    )

class PhotoVisibilityUpdate(BaseModel):
    """
    Esquema para cambiar la visibilidad de una foto.

    Args:
        visibility (Visibility): Nueva visibilidad.
    """
    visibility: Visibility

    model_config = ConfigDict(json_schema_extra={"example": {"visibility": "PUBLIC"}})

class AddToAlbum(BaseModel):
    """
    Esquema para añadir una foto a un álbum.

    Args:
        album_id (UUID): ID del álbum destino.
    """
    album_id: UUID

class MembershipResponse(BaseModel):
    """
    Relación creada entre una foto y un álbum.

    Args:
        id (UUID): ID de la membresía.
        photo_id (UUID): ID de la foto.
        album_id (UUID): ID del álbum.
        added_at (datetime): Fecha en que se añadió.
    """
    id: UUID
    photo_id: UUID
    album_id: UUID
    added_at: datetime

    model_config = ConfigDict(from_attributes=True)

class FeedPhotoResponse(BaseModel):
    """
    Elemento del feed público.

    Args:
        id (UUID): ID de la foto.
        owner_id (UUID): ID del propietario.
        file_url (str): URL pública del archivo.
        title (Optional[str]): Título.
        created_at (datetime): Fecha de subida.
        likes_count (int): Número de likes recibidos.
    """
    id: UUID
    owner_id: UUID
    file_url: str
    title: Optional[str] = None
    created_at: datetime
    likes_count: int = Field(0, ge=0)
