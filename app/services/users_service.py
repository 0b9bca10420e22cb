"""
Módulo de servicio para la gestión de los usuarios
"""
import re
import logging
from uuid import UUID
from typing import Optional
from sqlalchemy.orm import Session

from app.settings import settings
from app.utils import get_now
from app.utils.images import probe_image
from app.errors import AuthenticationError, ConflictError, FourtogenicError, ResourceNotFoundError
from app.controllers.user_controller import UserController
from app.database.models.users_model import UsersDatabaseModel
from app.services.profile_service import ProfileService
from app.services.security_service import SecurityService
from app.services.storage_service import ObjectStore
from app.schemas import (
    UserCreate,
    UserLogin,
    UserResponse,
    AuthResponse,
    ProfileUpdate,
    PublicProfileResponse,
    MyProfileResponse
)

class UserService:
    """
    Servicio de alto nivel para gestionar la lógica de negocio de los usuarios.
    """
    def __init__(self, session: Session, object_store: Optional[ObjectStore] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session
        self.object_store = object_store
        self.user_controller = UserController(session)
        self.profile_service = ProfileService(session)
        self.security_service = SecurityService()

    # ========= METODOS PRIVADOS =========
    def _get_existing(self, user_id: UUID) -> UsersDatabaseModel:
        user = self.user_controller.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundError(message="Usuario no encontrado", details={"user_id": str(user_id)})
        return user

    def _issue_token(self, user: UsersDatabaseModel) -> AuthResponse:
        token = self.security_service.create_access_token(data={"sub": str(user.id)})
        return AuthResponse(
            user=UserResponse.model_validate(user),
            access_token=token.access_token,
            token_type=token.token_type
        )

    @staticmethod
    def _safe_filename(filename: Optional[str]) -> str:
        name = re.sub(r"[^A-Za-z0-9._-]", "_", filename or "avatar")
        return name.strip("._") or "avatar"

    # ========= METODOS DE AUTENTICACIÓN =========
    def register(self, user_data: UserCreate) -> AuthResponse:
        """
        Registra un usuario nuevo y le emite un token de acceso.

        Args:
            user_data (UserCreate): Datos de registro del usuario.

        Returns:
            AuthResponse: Usuario creado y token.

        Raises:
            ConflictError: Si el email o el nombre de usuario ya están en uso.
        """
        if self.user_controller.exists(user_data.email, user_data.username):
            raise ConflictError(
                message="El email o el nombre de usuario ya están en uso",
                details={"email": user_data.email, "username": user_data.username}
            )

        hashed_password = self.security_service.get_password_hash(user_data.password)
        new_user = self.user_controller.create(user_data, hashed_password)

        self.logger.info(f"Usuario {new_user.username} registrado exitosamente con ID {new_user.id}")
        return self._issue_token(new_user)

    def login(self, credentials: UserLogin) -> AuthResponse:
        """
        Autenticación de usuario a partir de credenciales de inicio de sesión.

        Args:
            credentials (UserLogin): Email y contraseña.

        Returns:
            AuthResponse: Usuario y token.

        Raises:
            AuthenticationError: Si el email no existe o la contraseña no coincide.
        """
        user = self.user_controller.get_by_email(credentials.email)
        if not user or not self.security_service.verify_password(credentials.password, user.password_hash):
            self.logger.info(f"Intento de login fallido para {credentials.email}")
            raise AuthenticationError(message="Credenciales inválidas")

        return self._issue_token(user)

    # ========= PERFILES =========
    def get_me(self, user_id: UUID) -> MyProfileResponse:
        """Perfil propio con email y estadísticas."""
        user = self._get_existing(user_id)
        stats = self.profile_service.stats(user.id)
        return MyProfileResponse(
            **UserResponse.model_validate(user).model_dump(),
            **stats.model_dump()
        )

    def get_public_profile(self, user_id: UUID) -> PublicProfileResponse:
        """
        Perfil público de un usuario, sin email.

        Raises:
            ResourceNotFoundError: Si el usuario no existe.
        """
        user = self._get_existing(user_id)
        stats = self.profile_service.stats(user.id)
        public_fields = UserResponse.model_validate(user).model_dump(exclude={"email"})
        return PublicProfileResponse(**public_fields, **stats.model_dump())

    def update_me(
        self,
        user_id: UUID,
        update_data: ProfileUpdate,
        avatar_data: Optional[bytes] = None,
        avatar_filename: Optional[str] = None
    ) -> MyProfileResponse:
        """
        Actualiza el perfil propio. Si se sube un avatar, su URL reemplaza a
        `avatar_url`.

        Args:
            user_id (UUID): ID del usuario.
            update_data (ProfileUpdate): Campos a cambiar.
            avatar_data (Optional[bytes]): Contenido del avatar subido.
            avatar_filename (Optional[str]): Nombre original del avatar.

        Returns:
            MyProfileResponse: Perfil actualizado.

        Raises:
            ValidationError: Si el avatar no es una imagen soportada.
            StorageError: Si el almacenamiento falla; en ese caso no se cambia nada.
        """
        user = self._get_existing(user_id)
        changes = update_data.model_dump(exclude_unset=True)

        if avatar_data is not None:
            if self.object_store is None:
                raise FourtogenicError("No hay almacenamiento configurado para avatares")
            image_format = probe_image(avatar_data, settings.MAX_UPLOAD_BYTES)
            timestamp = int(get_now().timestamp() * 1000)
            key = f"avatars/{user.id}/{timestamp}-{self._safe_filename(avatar_filename)}"
            changes["avatar_url"] = self.object_store.put(key, avatar_data, image_format.content_type)

        if changes:
            updated = self.user_controller.update_profile(user, changes)
            if not updated:
                raise FourtogenicError("No se pudo actualizar el perfil")
            self.logger.info(f"Perfil de {user_id} actualizado: {sorted(changes)}")

        return self.get_me(user.id)
