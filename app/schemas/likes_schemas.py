from uuid import UUID
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator

from app.enums import LikeTargetType

class LikeTarget(BaseModel):
    """
    Objetivo de un like: discriminador + id. Es el único punto donde se
    decide cuál de photo_id / album_id queda informado.
    """
    type: LikeTargetType
    id: UUID

    model_config = ConfigDict(frozen=True)

    @property
    def photo_id(self) -> Optional[UUID]:
        return self.id if self.type == LikeTargetType.PHOTO else None

    @property
    def album_id(self) -> Optional[UUID]:
        return self.id if self.type == LikeTargetType.ALBUM else None

class LikeCreate(BaseModel):
    """
    Esquema para dar like.

    Args:
        target_type (LikeTargetType): PHOTO o ALBUM.
        target_id (UUID): ID de la foto o del álbum.
    """
    target_type: LikeTargetType
    target_id: UUID

    model_config = ConfigDict(
        json_schema_extra={"example": {"target_type": "PHOTO", "target_id": "xxxx-xxxx-xxxx-xxxx"}}
    )

    @property
    def target(self) -> LikeTarget:
        return LikeTarget(type=self.target_type, id=self.target_id)

class LikeResponse(BaseModel):
    """
    Like almacenado.

    Args:
        id (UUID): ID del like.
        user_id (UUID): Usuario que dio like.
        target_type (LikeTargetType): Tipo de objetivo.
        photo_id (Optional[UUID]): Foto, si el objetivo es PHOTO.
        album_id (Optional[UUID]): Álbum, si el objetivo es ALBUM.
        created_at (datetime): Fecha del like.
    """
    id: UUID
    user_id: UUID
    target_type: LikeTargetType
    photo_id: Optional[UUID] = None
    album_id: Optional[UUID] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="after")
    def _check_single_target(self) -> "LikeResponse":
        if (self.photo_id is None) == (self.album_id is None):
            raise ValueError("Un like debe apuntar exactamente a una foto o a un álbum")
        return self

class LikedPhotoView(BaseModel):
    """Vista resumida de la foto que recibió el like."""
    id: UUID
    file_url: str
    title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class LikedAlbumView(BaseModel):
    """Vista resumida del álbum que recibió el like."""
    id: UUID
    title: str

    model_config = ConfigDict(from_attributes=True)

class MyLikeItem(BaseModel):
    """
    Elemento del listado de likes del usuario. Solo uno de photo / album viene informado.

    Args:
        like_id (UUID): ID del like.
        target_type (LikeTargetType): PHOTO o ALBUM.
        created_at (datetime): Fecha del like.
        photo (Optional[LikedPhotoView]): Foto, si target_type es PHOTO.
        album (Optional[LikedAlbumView]): Álbum, si target_type es ALBUM.
    """
    like_id: UUID
    target_type: LikeTargetType
    created_at: datetime
    photo: Optional[LikedPhotoView] = None
    album: Optional[LikedAlbumView] = None
