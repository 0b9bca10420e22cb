"""
Reglas de acceso sobre contenido (fotos y álbumes).
"""
from uuid import UUID
from typing import Any, Dict, Optional

from app.enums import Visibility
from app.errors import PermissionDeniedError

class AccessPolicy:
    """
    Predicados de autorización sobre (solicitante, propietario, visibilidad).
    Un solicitante None es un visitante anónimo.
    """
    @staticmethod
    def can_view(requester_id: Optional[UUID], owner_id: UUID, visibility: Visibility) -> bool:
        """
        True si el solicitante es el propietario o el contenido es PUBLIC.
        """
        if visibility == Visibility.PUBLIC:
            return True
        return requester_id is not None and str(requester_id) == str(owner_id)

    @staticmethod
    def can_mutate(requester_id: Optional[UUID], owner_id: UUID) -> bool:
        """
        True solo si el solicitante es el propietario.
        """
        return requester_id is not None and str(requester_id) == str(owner_id)

    @staticmethod
    def assert_can_view(requester_id: Optional[UUID], resource: Any, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Lanza PermissionDeniedError si el solicitante no puede ver el recurso.

        Args:
            requester_id (Optional[UUID]): Usuario que solicita, None si es anónimo.
            resource: Foto o álbum (con owner_id y visibility).
            details (Optional[Dict]): Información adicional para el error.
        """
        if not AccessPolicy.can_view(requester_id, resource.owner_id, resource.visibility):
            raise PermissionDeniedError(
                message="No tienes permiso para ver este recurso",
                details=details or {"resource_id": str(resource.id)}
            )

    @staticmethod
    def assert_can_mutate(requester_id: Optional[UUID], resource: Any, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Lanza PermissionDeniedError si el solicitante no es el propietario del recurso.
        """
        if not AccessPolicy.can_mutate(requester_id, resource.owner_id):
            raise PermissionDeniedError(
                message="Solo el propietario puede modificar este recurso",
                details=details or {"resource_id": str(resource.id)}
            )
