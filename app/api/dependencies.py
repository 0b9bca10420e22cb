"""
Dependencias para inyectar en la API
"""
from uuid import UUID
from functools import lru_cache
from typing import Optional
from sqlalchemy.orm import Session
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.errors import AuthenticationError
from app.database.db_session import get_db
from app.settings import settings, Settings
from app.controllers.user_controller import UserController
from app.services.feed_service import FeedService
from app.services.likes_service import LikesService
from app.services.users_service import UserService
from app.services.photos_service import PhotosService
from app.services.albums_service import AlbumService
from app.services.security_service import SecurityService
from app.services.storage_service import ObjectStore, get_object_store

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

# ============ Proveedores de Servicios ============
def get_settings_instance() -> Settings:
    """Provee una instancia de Settings."""
    return settings

@lru_cache
def get_object_store_instance() -> ObjectStore:
    """Provee el almacenamiento de objetos configurado (una instancia por proceso)."""
    return get_object_store(settings)

def get_user_service(
    db: Session = Depends(get_db),
    object_store: ObjectStore = Depends(get_object_store_instance)
) -> UserService:
    """
    Provee una instancia de UserService con la sesión de DB inyectada.

    Args:
        db (Session): Sesión de la base de datos.
        object_store (ObjectStore): Almacenamiento para avatares.

    Returns:
        UserService: Instancia de UserService.
    """
    return UserService(db, object_store)

def get_photos_service(
    db: Session = Depends(get_db),
    object_store: ObjectStore = Depends(get_object_store_instance)
) -> PhotosService:
    """
    Provee PhotosService.

    Args:
        db (Session): Sesión de la base de datos.
        object_store (ObjectStore): Almacenamiento de las fotos.

    Returns:
        PhotosService: Instancia de PhotosService.
    """
    return PhotosService(db, object_store)

def get_albums_service(db: Session = Depends(get_db)) -> AlbumService:
    """Provee AlbumService."""
    return AlbumService(db)

def get_likes_service(db: Session = Depends(get_db)) -> LikesService:
    """Provee LikesService."""
    return LikesService(db)

def get_feed_service(db: Session = Depends(get_db)) -> FeedService:
    """Provee FeedService."""
    return FeedService(db)

# ============ Dependencias de Seguridad y Usuario ============
def _resolve_user_id(token: str, db: Session) -> UUID:
    token_data = SecurityService.decode_token(token, expected_scope="access")
    try:
        user_id = UUID(token_data.user_id)
    except ValueError:
        raise AuthenticationError(message="Credencial inválida")

    if UserController(db).get_by_id(user_id) is None:
        raise AuthenticationError(message="Credenciales no válidas o usuario inexistente")
    return user_id

def get_current_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> UUID:
    """
    Valida el token JWT del header Authorization y retorna el ID del usuario.

    Args:
        token (Optional[str]): Token extraído del header Authorization.
        db (Session): Sesión de la base de datos.

    Returns:
        UUID: ID del usuario autenticado.

    Raises:
        AuthenticationError: Si el token no existe, es inválido o el usuario ya no existe.
    """
    if not token:
        raise AuthenticationError(message="No se proporcionaron credenciales de autenticación")
    return _resolve_user_id(token, db)

def get_optional_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> Optional[UUID]:
    """
    Igual que get_current_user_id pero admite peticiones anónimas (retorna None).
    Un token presente pero inválido sigue siendo un error.
    """
    if not token:
        return None
    return _resolve_user_id(token, db)
