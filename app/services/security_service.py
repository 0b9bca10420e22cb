"""
Módulo de seguridad y autenticación de usuarios.
"""
from typing import Optional
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone

from app.settings import settings
from app.errors import AuthenticationError
from app.schemas import TokenData, Token

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_SCOPE = "access"

class SecurityService:
    """
    Servicio de seguridad y autenticación de usuarios.
    """
    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verificar una contraseña plana contra una contraseña hash.

        Args:
            plain_password (str): La contraseña plana a verificar.
            hashed_password (str): El hash de la contraseña a comparar.

        Returns:
            bool: True si las contraseñas coinciden, False en caso contrario.
        """
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def get_password_hash(password: str) -> str:
        """
        Hash una contraseña plana utilizando bcrypt.

        Args:
            password (str): La contraseña plana a hashear.

        Returns:
            str: La contraseña hasheada.
        """
        return pwd_context.hash(password)

    @staticmethod
    def _create_generic_token(data: dict, expires_delta: timedelta, scope: str) -> str:
        """
        Helper interno para crear un token JWT con un alcance específico.

        Args:
            data (dict): Data a incluir en el payload (claims).
            expires_delta (timedelta): Tiempo hasta que expire el token.
            scope (str): El propósito del token.

        Returns:
            str: La cadena JWT codificada.
        """
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode.update({"exp": expire, "scope": scope})
        return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> Token:
        """
        Crea un token JWT de acceso para sesiones de usuario.

        Args:
            data (dict): Diccionario que contiene 'sub' (ID del usuario).
            expires_delta (Optional[timedelta]): Tiempo de expiración personalizado.

        Returns:
            Token: El modelo Pydantic Token que contiene el JWT.
        """
        delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        encoded_jwt = SecurityService._create_generic_token(data, delta, scope=ACCESS_SCOPE)
        return Token(access_token=encoded_jwt, token_type="bearer")

    @staticmethod
    def decode_token(token: str, expected_scope: str = ACCESS_SCOPE) -> TokenData:
        """
        Decodifica y valida un token JWT basado en el alcance esperado.

        Args:
            token (str): La cadena JWT a decodificar.
            expected_scope (str): El alcance esperado.

        Returns:
            TokenData: Datos validos del token.

        Raises:
            AuthenticationError: Si el token es inválido, expira o tiene el alcance incorrecto.
        """
        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except ExpiredSignatureError:
            raise AuthenticationError(message="Token expirado")
        except JWTError:
            raise AuthenticationError(message="No se pudo validar la credencial")

        user_id: Optional[str] = payload.get("sub")
        token_scope: Optional[str] = payload.get("scope")

        if user_id is None or token_scope != expected_scope:
            raise AuthenticationError(
                message="Credencial inválida o alcance incorrecto",
                details={"expected_scope": expected_scope}
            )

        return TokenData(user_id=user_id)
