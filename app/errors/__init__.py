from app.errors.base import (
    FourtogenicError,
    ValidationError,
    ResourceNotFoundError,
    PermissionDeniedError,
    ConflictError,
    AuthenticationError,
    StorageError
)
from app.errors.config_errors import ConfigurationError
