from typing import Any, Dict, Optional

class FourtogenicError(Exception):
    """Base para todos los errores de la aplicación."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ValidationError(FourtogenicError):
    """Error de validación de datos de entrada (formato, cursor, tamaño)."""
    pass

class ResourceNotFoundError(FourtogenicError):
    """Cuando un recurso (User, Photo, Album, Membership) no existe."""
    pass

class PermissionDeniedError(FourtogenicError):
    """Cuando un usuario no tiene permisos para ver o modificar un recurso."""
    pass

class ConflictError(FourtogenicError):
    """Violación de unicidad que no tiene un camino idempotente (membresía duplicada, email en uso)."""
    pass

class AuthenticationError(FourtogenicError):
    """Credencial ausente, inválida o expirada."""
    pass

class StorageError(FourtogenicError):
    """Errores del almacenamiento de objetos (disco local o S3)."""
    pass
