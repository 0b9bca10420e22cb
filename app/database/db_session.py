from app.database.db_config import SessionLocal

# Dependency
def get_db():
    """
    Generador de sesión de base de datos. Una sesión por petición.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
