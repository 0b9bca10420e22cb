"""
Módulo para definir las rutas de autenticación de la API.
"""
from fastapi import APIRouter, status, Depends

from app.api.dependencies import get_user_service
from app.services.users_service import UserService
from app.schemas import UserLogin, UserCreate, AuthResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """
    Registro público de nuevos usuarios. Retorna el usuario y su token de acceso.
    """
    return user_service.register(user_in)

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    user_service: UserService = Depends(get_user_service)
):
    """
    Verifica email y contraseña y emite un token de acceso.
    """
    return user_service.login(credentials)
