import uuid
from typing import TYPE_CHECKING, Optional
from datetime import datetime
from sqlalchemy import DateTime, Enum, String, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.enums import Visibility
from app.utils import get_now
from app.database.db_base import Base
if TYPE_CHECKING:
    from app.database.models.users_model import UsersDatabaseModel
    from app.database.models.memberships_model import MembershipDatabaseModel

class AlbumDatabaseModel(Base):
    """Modelo de tabla para álbumes."""
    __tablename__ = "albums"
    __table_args__ = (
        Index("ix_albums_owner_created", "owner_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"))
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    visibility: Mapped[Visibility] = mapped_column(Enum(Visibility), default=Visibility.PRIVATE)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=get_now)

    # Relación con User
    owner: Mapped["UsersDatabaseModel"] = relationship(back_populates="albums")

    # Relación con las membresías (foto <-> álbum)
    memberships: Mapped[list["MembershipDatabaseModel"]] = relationship(back_populates="album")

    def __repr__(self) -> str:
        return f"<Album {self.id} owner={self.owner_id} {self.visibility}>"
