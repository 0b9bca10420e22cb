"""
Módulo para servir los archivos del almacenamiento local.
"""
import logging
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.settings import Settings

logger = logging.getLogger("Uploads")

def setup_uploads(app: FastAPI, settings: Settings) -> None:
    """
    Monta UPLOADS_PATH como archivos estáticos bajo UPLOADS_URL_PREFIX cuando el
    backend de almacenamiento es local. Con S3 las URLs apuntan al bucket.

    Args:
        app (FastAPI): Instancia de la aplicación FastAPI.
        settings (Settings): Configuración de la aplicación.

    Returns:
        None
    """
    if settings.OBJECT_STORE_BACKEND != "local":
        return

    uploads_path = settings.UPLOADS_PATH
    uploads_path.mkdir(parents=True, exist_ok=True)
    app.mount(settings.UPLOADS_URL_PREFIX, StaticFiles(directory=str(uploads_path)), name="uploads")
    logger.info(f"Sirviendo {uploads_path} en {settings.UPLOADS_URL_PREFIX}")
