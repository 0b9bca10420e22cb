"""
Modelo de los likes. El objetivo es polimórfico: target_type indica cuál de
photo_id / album_id está informado y el otro queda siempre a NULL.
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.enums import LikeTargetType
from app.utils import get_now
from app.database.db_base import Base
if TYPE_CHECKING:
    from app.database.models.photos_model import PhotoDatabaseModel
    from app.database.models.albums_model import AlbumDatabaseModel

class LikeDatabaseModel(Base):
    """Modelo de tabla para likes sobre fotos o álbumes."""
    __tablename__ = "likes"
    __table_args__ = (
        # NULL no colisiona en un UNIQUE, así que cada restricción solo afecta a su tipo de objetivo
        UniqueConstraint("user_id", "photo_id", name="uq_likes_user_photo"),
        UniqueConstraint("user_id", "album_id", name="uq_likes_user_album"),
        CheckConstraint(
            "(target_type = 'PHOTO' AND photo_id IS NOT NULL AND album_id IS NULL) OR "
            "(target_type = 'ALBUM' AND album_id IS NOT NULL AND photo_id IS NULL)",
            name="ck_likes_single_target"
        ),
        Index("ix_likes_user_created", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    target_type: Mapped[LikeTargetType] = mapped_column(Enum(LikeTargetType))
    photo_id: Mapped[Optional[uuid.UUID]] = mapped_column(ForeignKey("photos.id", ondelete="CASCADE"), nullable=True)
    album_id: Mapped[Optional[uuid.UUID]] = mapped_column(ForeignKey("albums.id", ondelete="CASCADE"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=get_now)

    photo: Mapped[Optional["PhotoDatabaseModel"]] = relationship()
    album: Mapped[Optional["AlbumDatabaseModel"]] = relationship()

    def __repr__(self) -> str:
        return f"<Like {self.id} user={self.user_id} {self.target_type}>"
