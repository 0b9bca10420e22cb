import os
import tempfile

# La configuración se carga al importar app.settings: el entorno de pruebas va antes
_TEST_BASE_PATH = tempfile.mkdtemp(prefix="fourtogenic-tests-")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["BASE_PATH"] = _TEST_BASE_PATH
os.environ["DATABASE_URI"] = "sqlite://"
os.environ["OBJECT_STORE_BACKEND"] = "local"

import pytest
from io import BytesIO
from uuid import uuid4
from datetime import datetime, timedelta
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.settings import settings
from app.enums import Visibility
from app.errors import StorageError
from app.database.db_base import Base
from app.database.db_session import get_db
from app.database.models import (
    UsersDatabaseModel,
    PhotoDatabaseModel,
    AlbumDatabaseModel
)
from app.api.app_factory import create_app
from app.api.errors import register_error_handlers
from app.api.dependencies import get_object_store_instance


class FakeObjectStore:
    """Almacenamiento en memoria con inyección de fallos."""
    def __init__(self):
        self.objects = {}
        self.fail_put = False
        self.fail_delete = False

    def put(self, key, data, content_type):
        if self.fail_put:
            raise StorageError(message="put falló", details={"key": key})
        self.objects[key] = (data, content_type)
        return f"/uploads/{key}"

    def delete(self, key):
        if self.fail_delete:
            raise StorageError(message="delete falló", details={"key": key})
        return self.objects.pop(key, None) is not None


@pytest.fixture
def db_session():
    """Sesión de DB en memoria para aislamiento total."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture
def object_store():
    return FakeObjectStore()

@pytest.fixture
def make_user(db_session):
    """Crea usuarios directamente en la DB (sin bcrypt, no hace falta login)."""
    def _make_user(username=None):
        username = username or f"user_{uuid4().hex[:8]}"
        user = UsersDatabaseModel(
            email=f"{username}@example.com",
            username=username,
            password_hash="not-a-real-hash"
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user

@pytest.fixture
def make_photo(db_session):
    def _make_photo(owner, visibility=Visibility.PRIVATE, created_at=None, title=None):
        photo = PhotoDatabaseModel(
            owner_id=owner.id,
            file_url=f"/uploads/photos/{owner.id}/{uuid4()}.jpg",
            title=title,
            visibility=visibility
        )
        if created_at is not None:
            photo.created_at = created_at
        db_session.add(photo)
        db_session.commit()
        db_session.refresh(photo)
        return photo
    return _make_photo

@pytest.fixture
def make_album(db_session):
    def _make_album(owner, visibility=Visibility.PRIVATE, title="Álbum", created_at=None):
        album = AlbumDatabaseModel(owner_id=owner.id, title=title, visibility=visibility)
        if created_at is not None:
            album.created_at = created_at
        db_session.add(album)
        db_session.commit()
        db_session.refresh(album)
        return album
    return _make_album

@pytest.fixture
def timestamps():
    """Marcas de tiempo crecientes y deterministas."""
    base = datetime(2025, 1, 1, 12, 0, 0)
    return [base + timedelta(minutes=i) for i in range(100)]

@pytest.fixture
def jpeg_bytes():
    """Una imagen JPEG real generada en memoria."""
    buffer = BytesIO()
    Image.new("RGB", (64, 48), color="red").save(buffer, format="JPEG")
    return buffer.getvalue()

@pytest.fixture
def png_bytes():
    buffer = BytesIO()
    Image.new("RGBA", (8, 8), color=(0, 0, 255, 128)).save(buffer, format="PNG")
    return buffer.getvalue()

@pytest.fixture
def client(db_session, object_store):
    """TestClient con la sesión en memoria y el almacenamiento falso."""
    app = create_app(settings)
    register_error_handlers(app)

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_object_store_instance] = lambda: object_store

    with TestClient(app) as test_client:
        yield test_client
