from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr

from app.schemas.user_schemas import UserResponse

class Token(BaseModel):
    """
    Esquema para el token.

    Args:
        access_token (str): Token de acceso.
        token_type (str): Tipo de token
    """
    access_token: str
    token_type: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "token_type": "bearer"
                }
            ]
        }
    )


class TokenData(BaseModel):
    """
    Esquema para datos del token.

    Args:
        user_id (Optional[str]): ID del usuario asociado con el token.
    """
    user_id: Optional[str] = None


class UserLogin(BaseModel):
    """
    Esquema para el endpoint de autenticación.

    Args:
        email (EmailStr): Dirección de correo electrónico.
        password (str): Contraseña.
    """
    email: EmailStr
    password: str

class AuthResponse(BaseModel):
    """
    Respuesta de registro y login: el usuario y su token de acceso.
    """
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
