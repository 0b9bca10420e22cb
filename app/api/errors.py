import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from app.errors import (
    FourtogenicError,
    ResourceNotFoundError,
    PermissionDeniedError,
    ConflictError,
    AuthenticationError,
    StorageError,
    ValidationError
)

logger = logging.getLogger("ErrorHandlers")

# Mapeo de excepciones a códigos HTTP
ERROR_STATUS_MAP = {
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    StorageError: status.HTTP_507_INSUFFICIENT_STORAGE,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}

def status_for(exc: FourtogenicError) -> int:
    """Código HTTP de un error de dominio; 500 para los que no tienen mapeo."""
    for error_class, http_status in ERROR_STATUS_MAP.items():
        if isinstance(exc, error_class):
            return http_status
    return status.HTTP_500_INTERNAL_SERVER_ERROR

def register_error_handlers(app: FastAPI):
    """
    Registra los manejadores globales de excepciones para la aplicación.
    """

    @app.exception_handler(FourtogenicError)
    async def global_fourtogenic_handler(request: Request, exc: FourtogenicError):
        http_status = status_for(exc)
        if http_status >= 500:
            logger.error(f"{exc.__class__.__name__} en {request.url.path}: {exc.message}")

        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None

        return JSONResponse(
            status_code=http_status,
            content={
                "status": "error",
                "code": exc.__class__.__name__,
                "message": exc.message,
                "details": exc.details or {}
            },
            headers=headers
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Captura cualquier error no controlado para evitar fugas de información."""
        logger.error(f"Unhandled error: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": "InternalServerError",
                "message": "Ha ocurrido un error inesperado en el servidor."
            },
        )
