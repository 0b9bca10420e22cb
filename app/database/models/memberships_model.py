"""
Modelo de la arista foto <-> álbum. Tiene identidad propia porque su id
sirve de desempate en la paginación de las fotos de un álbum.
"""
import uuid
from typing import TYPE_CHECKING
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.utils import get_now
from app.database.db_base import Base
if TYPE_CHECKING:
    from app.database.models.photos_model import PhotoDatabaseModel
    from app.database.models.albums_model import AlbumDatabaseModel

class MembershipDatabaseModel(Base):
    """Modelo de tabla para la pertenencia de una foto a un álbum."""
    __tablename__ = "album_photos"
    __table_args__ = (
        UniqueConstraint("photo_id", "album_id", name="uq_album_photos_photo_album"),
        Index("ix_album_photos_album_added", "album_id", "added_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    photo_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("photos.id", ondelete="CASCADE"))
    album_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("albums.id", ondelete="CASCADE"))
    added_at: Mapped[datetime] = mapped_column(DateTime, default=get_now)

    photo: Mapped["PhotoDatabaseModel"] = relationship(back_populates="memberships")
    album: Mapped["AlbumDatabaseModel"] = relationship(back_populates="memberships")

    def __repr__(self) -> str:
        return f"<Membership {self.id} photo={self.photo_id} album={self.album_id}>"
