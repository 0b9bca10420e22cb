import sys
from pathlib import Path
from typing import Literal, Optional
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.settings.version import __version__
from app.utils.get_environment_path import get_env_paths


class Settings(BaseSettings):
    # Datos base
    APP_NAME: str = "Fourtogenic"
    APP_VERSION: str = __version__
    APP_URL: str = "http://localhost:8000"

    # Directorios (todos derivan de BASE_PATH para poder sobreescribirlo desde el entorno)
    BASE_PATH: Path = Path.home() / ".Fourtogenic"

    @property
    def DATA_PATH(self) -> Path:
        return self.BASE_PATH / "data"

    @property
    def LOGS_PATH(self) -> Path:
        return self.DATA_PATH / "logs"

    @property
    def UPLOADS_PATH(self) -> Path:
        return self.DATA_PATH / "uploads"

    # Database
    @property
    def INSTANCE_PATH(self) -> Path:
        return self.BASE_PATH / "instance"

    DATABASE_URI: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        db_path = self.INSTANCE_PATH / f"{self.APP_NAME}.db"
        # sqlite://// para absoluto
        return f"sqlite:///{db_path.absolute()}"

    DATABASE_ECHO: bool = False
    DATABASE_CONNECT_ARGS: dict = {"check_same_thread": False}

    # API
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    API_RELOAD: bool = True
    API_LOG_LEVEL: str = "info"

    # Encriptado
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Paginación
    PAGE_DEFAULT_LIMIT: int = 20
    PAGE_MAX_LIMIT: int = 100

    # Almacenamiento de objetos
    OBJECT_STORE_BACKEND: Literal["local", "s3"] = "local"
    UPLOADS_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    S3_BUCKET: Optional[str] = None
    S3_REGION: Optional[str] = None
    S3_ACCESS_KEY: Optional[str] = None
    S3_SECRET_KEY: Optional[str] = None
    S3_ENDPOINT_URL: Optional[str] = None
    S3_PUBLIC_BASE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=get_env_paths(), env_file_encoding="utf-8", extra="ignore")

    def ensure_dirs(self) -> None:
        """Crea la estructura de directorios necesaria para el servicio."""
        dirs = [
            self.BASE_PATH, self.DATA_PATH, self.LOGS_PATH,
            self.INSTANCE_PATH, self.UPLOADS_PATH
        ]
        for directory in dirs:
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError:
                print(f" ERROR CRÍTICO: No se pudo crear el directorio {directory}. revise permisos.")
                sys.exit(1)


def load_settings() -> Settings:
    """
    Instancia la configuración capturando errores de validación para
    presentar mensajes amigables al usuario.
    """
    try:
        instance = Settings()
        instance.ensure_dirs()
        return instance
    except ValidationError as e:
        missing_vars = [str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"]

        message = (
            "\n" + "="*60 + "\n"
            " ERROR DE CONFIGURACIÓN EN FOURTOGENIC\n"
            "="*60 + "\n"
            "Faltan variables de entorno obligatorias en tu archivo .env o sistema:\n"
            f"  {', '.join(missing_vars)}\n\n"
            "Por favor, revisa el archivo '.env.example' y asegúrate de configurar\n"
            "estas llaves para que el servicio pueda iniciar.\n"
            "="*60
        )
        print(message)
        sys.exit(1)

settings = load_settings()
