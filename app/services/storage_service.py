"""
Almacenamiento de objetos (blobs de fotos y avatares).

Dos implementaciones comparten el mismo protocolo: disco local, servido por la
propia API bajo UPLOADS_URL_PREFIX, y un bucket S3 compatible vía boto3.
"""
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.settings import Settings
from app.errors import StorageError, ConfigurationError

class ObjectStore(Protocol):
    """Contrato mínimo del almacenamiento de objetos."""

    def put(self, key: str, data: bytes, content_type: str) -> str:
        """Guarda los bytes bajo `key` y devuelve la URL pública."""
        ...

    def delete(self, key: str) -> bool:
        """Elimina el objeto. False si no existía."""
        ...


class LocalObjectStore:
    """
    Guarda los objetos como archivos bajo un directorio raíz.
    """
    def __init__(self, root: Path, url_prefix: str = "/uploads"):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.logger.critical(f"No se pudo crear el directorio de subidas {self.root}: {e}")
            raise StorageError(message="Directorio de subidas no disponible", details={"path": str(self.root)})

    def _path_for(self, key: str) -> Path:
        target = (self.root / key).resolve()
        if self.root.resolve() not in target.parents:
            raise StorageError(message="Clave de objeto inválida", details={"key": key})
        return target

    def put(self, key: str, data: bytes, content_type: str) -> str:
        """
        Escribe el archivo en disco.

        Args:
            key (str): Ruta relativa del objeto.
            data (bytes): Contenido.
            content_type (str): Tipo MIME (no se usa en disco).

        Returns:
            str: URL pública del objeto.

        Raises:
            StorageError: Si la escritura falla.
        """
        target = self._path_for(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            self.logger.error(f"Error escribiendo {target}: {e}")
            raise StorageError(message="No se pudo guardar el archivo", details={"key": key})

        self.logger.info(f"Objeto guardado: {key} ({len(data)} bytes)")
        return f"{self.url_prefix}/{key}"

    def delete(self, key: str) -> bool:
        target = self._path_for(key)
        if not target.exists():
            self.logger.debug(f"Objeto {key} no existe, nada que borrar")
            return False
        try:
            target.unlink()
        except OSError as e:
            self.logger.error(f"Error eliminando {target}: {e}")
            raise StorageError(message="No se pudo eliminar el archivo", details={"key": key})
        return True


class S3ObjectStore:
    """
    Almacenamiento en un bucket S3 compatible (AWS, R2, MinIO).
    """
    def __init__(self, bucket: str, public_base: str, client: Optional[Any] = None, **client_kwargs: Any):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.bucket = bucket
        self.public_base = public_base.rstrip("/")
        self.client = client or boto3.session.Session().client(
            "s3",
            config=Config(signature_version="s3v4"),
            **client_kwargs
        )

    def put(self, key: str, data: bytes, content_type: str) -> str:
        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=content_type)
        except (BotoCoreError, ClientError) as e:
            self.logger.error(f"Error subiendo {key} a {self.bucket}: {e}")
            raise StorageError(message="No se pudo subir el archivo", details={"key": key})

        self.logger.info(f"Objeto subido a s3://{self.bucket}/{key}")
        return f"{self.public_base}/{key}"

    def delete(self, key: str) -> bool:
        """
        Elimina el objeto del bucket. delete_object no distingue entre objeto
        borrado y objeto inexistente, por eso se consulta antes con head_object.
        """
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in ("404", "NoSuchKey", "NotFound"):
                return False
            self.logger.error(f"Error consultando {key} en {self.bucket}: {e}")
            raise StorageError(message="No se pudo consultar el archivo", details={"key": key})
        except BotoCoreError as e:
            raise StorageError(message="No se pudo consultar el archivo", details={"key": key, "error": str(e)})

        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            self.logger.error(f"Error eliminando {key} de {self.bucket}: {e}")
            raise StorageError(message="No se pudo eliminar el archivo", details={"key": key})
        return True


def get_object_store(settings: Settings) -> ObjectStore:
    """
    Construye el almacenamiento configurado en OBJECT_STORE_BACKEND.

    Raises:
        ConfigurationError: Si el backend s3 no tiene bucket o URL pública.
    """
    if settings.OBJECT_STORE_BACKEND == "s3":
        if not settings.S3_BUCKET or not settings.S3_PUBLIC_BASE:
            raise ConfigurationError(
                message="Configuración incompleta para el backend s3",
                missing_fields=[name for name in ("S3_BUCKET", "S3_PUBLIC_BASE") if not getattr(settings, name)]
            )
        return S3ObjectStore(
            bucket=settings.S3_BUCKET,
            public_base=settings.S3_PUBLIC_BASE,
            endpoint_url=settings.S3_ENDPOINT_URL,
            region_name=settings.S3_REGION,
            aws_access_key_id=settings.S3_ACCESS_KEY,
            aws_secret_access_key=settings.S3_SECRET_KEY
        )

    return LocalObjectStore(root=settings.UPLOADS_PATH, url_prefix=settings.UPLOADS_URL_PREFIX)
