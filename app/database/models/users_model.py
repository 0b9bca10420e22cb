import uuid
from typing import TYPE_CHECKING, Optional
from datetime import datetime
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.utils import get_now
from app.database.db_base import Base
if TYPE_CHECKING:
    from app.database.models.photos_model import PhotoDatabaseModel
    from app.database.models.albums_model import AlbumDatabaseModel

class UsersDatabaseModel(Base):
    """Modelo de tabla de usuarios."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(255), unique=True)
    username: Mapped[str] = mapped_column(String(50), unique=True)
    password_hash: Mapped[str] = mapped_column(String(255))

    # Perfil
    display_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=get_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=get_now, onupdate=get_now)

    # Relación 1:N con las fotos
    photos: Mapped[list["PhotoDatabaseModel"]] = relationship(back_populates="owner")

    # Relación 1:N con los álbumes
    albums: Mapped[list["AlbumDatabaseModel"]] = relationship(back_populates="owner")

    def __repr__(self) -> str:
        return f"<User {self.id} {self.username}>"
