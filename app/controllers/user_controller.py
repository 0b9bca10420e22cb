"""
User controller module for database CRUD operations.
"""
import logging
from uuid import UUID
from typing import Optional, Dict, Any
from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from app.enums import LikeTargetType
from app.controllers.base_controller import BaseController
from app.database.models.users_model import UsersDatabaseModel
from app.database.models.photos_model import PhotoDatabaseModel
from app.database.models.likes_model import LikeDatabaseModel
from app.schemas.user_schemas import UserCreate, ProfileStats

class UserController(BaseController):
    """
    Controlador para la gestión de operaciones de base de datos de bajo nivel para usuarios.
    Actúa como límite entre los esquemas de Pydantic y los modelos de SQLAlchemy.
    """
    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.logger = logging.getLogger(self.__class__.__name__)

    def create(self, user_data: UserCreate, hashed_password: str) -> UsersDatabaseModel:
        """
        Asigna UserCreate a UsersDatabaseModel y lo conserva.

        Args:
            user_data (UserCreate): Esquema que contiene la entrada del usuario.
            hashed_password (str): Hash de contraseña precalculado.

        Returns:
            UsersDatabaseModel: El usuario creado.

        Raises:
            ConflictError: Si el email o el nombre de usuario ya existen.
        """
        # Extraemos los datos a un dict y eliminamos la password en plano
        user_dict = user_data.model_dump()
        user_dict.pop("password", None)

        new_user = UsersDatabaseModel(
            **user_dict,
            password_hash=hashed_password
        )
        return self._insert_or_conflict(new_user)

    def get_by_id(self, user_id: UUID) -> Optional[UsersDatabaseModel]:
        """
        Obtiene un usuario por su ID.

        Args:
            user_id (UUID): ID del usuario.

        Returns:
            Optional[UsersDatabaseModel]: El usuario o None.
        """
        return self._get_item_by_id(UsersDatabaseModel, user_id)

    def get_by_email(self, email: str) -> Optional[UsersDatabaseModel]:
        """
        Obtiene un usuario por su dirección de correo electrónico.

        Args:
            email (str): Dirección de correo electrónico del usuario.
        """
        stmt = select(UsersDatabaseModel).where(UsersDatabaseModel.email == email)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists(self, email: str, username: str) -> bool:
        """
        Indica si ya hay un usuario con ese email o ese nombre de usuario.
        """
        stmt = select(UsersDatabaseModel.id).where(
            or_(UsersDatabaseModel.email == email, UsersDatabaseModel.username == username)
        )
        return self.session.execute(stmt).first() is not None

    def update_profile(self, user: UsersDatabaseModel, changes: Dict[str, Any]) -> Optional[UsersDatabaseModel]:
        """
        Actualiza los campos de perfil indicados.

        Args:
            user (UsersDatabaseModel): Usuario a actualizar.
            changes (Dict[str, Any]): Campos y valores nuevos.

        Returns:
            Optional[UsersDatabaseModel]: El usuario actualizado o None.
        """
        for field, value in changes.items():
            setattr(user, field, value)

        if not self._update_or_rollback(user):
            self.logger.error(f"Failed to update user with ID {user.id}.")
            return None

        self.session.refresh(user)
        return user

    def get_profile_stats(self, user_id: UUID) -> ProfileStats:
        """
        Cuenta las fotos del usuario y los likes recibidos en ellas.

        Las dos cuentas son subconsultas escalares de una única sentencia SELECT,
        de modo que ambas se leen sobre la misma instantánea.

        Args:
            user_id (UUID): ID del usuario.

        Returns:
            ProfileStats: photo_count y received_like_count.
        """
        user_id = self._validate_uuid(user_id)

        photo_count = (
            select(func.count(PhotoDatabaseModel.id))
            .where(PhotoDatabaseModel.owner_id == user_id)
            .scalar_subquery()
        )
        received_like_count = (
            select(func.count(LikeDatabaseModel.id))
            .join(PhotoDatabaseModel, LikeDatabaseModel.photo_id == PhotoDatabaseModel.id)
            .where(
                LikeDatabaseModel.target_type == LikeTargetType.PHOTO,
                PhotoDatabaseModel.owner_id == user_id
            )
            .scalar_subquery()
        )

        row = self.session.execute(
            select(photo_count.label("photo_count"), received_like_count.label("received_like_count"))
        ).one()
        return ProfileStats(
            photo_count=row.photo_count or 0,
            received_like_count=row.received_like_count or 0
        )
