from uuid import UUID
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from app.enums import Visibility
from app.schemas.photos_schemas import PhotoResponse

class AlbumResponse(BaseModel):
    """
    Modelo de respuesta para un álbum.

    Args:
        id (UUID): ID del álbum.
        owner_id (UUID): ID del propietario.
        title (str): Título del álbum.
        description (Optional[str]): Descripción del álbum.
        visibility (Visibility): PUBLIC o PRIVATE.
        created_at (datetime): Fecha de creación.
    """
    id: UUID
    owner_id: UUID
    title: str
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
                    "title": "Verano 2025",
                    "description": "Viaje a la costa",
                    "visibility": "PUBLIC",
                    "created_at": "2025-01-01T00:00:00"
                }
            ]
        }
    )

class AlbumCreate(BaseModel):
    """
    Modelo para crear un álbum.

    Args:
        title (str): Título del álbum.
        description (Optional[str]): Descripción del álbum.
        visibility (Visibility): Visibilidad inicial, PRIVATE por defecto.
    """
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    visibility: Visibility = Visibility.PRIVATE

class AlbumWithPhotosResponse(BaseModel):
    """
    Álbum junto con una página de sus fotos.

    Args:
        album (AlbumResponse): Datos del álbum.
        items (List[PhotoResponse]): Fotos de la página actual.
        next_cursor (Optional[str]): Cursor de la siguiente página.
    """
    album: AlbumResponse
    items: List[PhotoResponse]
    next_cursor: Optional[str] = None
