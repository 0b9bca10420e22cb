"""
Paginación por cursor (keyset) compartida por todos los listados.

El cursor público es un token opaco: base64 url-safe de un JSON con la clave de
orden y el id del último elemento entregado. El cliente devuelve exactamente lo
que recibió; la posición no depende de que ese elemento siga existiendo.
"""
import json
import base64
import binascii
import logging
from uuid import UUID
from datetime import datetime
from typing import Callable, Generic, List, Optional, TypeVar

from app.settings import settings
from app.errors import ValidationError
from app.schemas.pagination_schemas import CursorPage, CursorPosition

T = TypeVar("T")

logger = logging.getLogger("CursorPager")

def encode_cursor(position: CursorPosition) -> str:
    """
    Serializa una posición a token opaco.

    Args:
        position (CursorPosition): Clave de orden e id del último elemento.

    Returns:
        str: Token url-safe sin relleno.
    """
    if isinstance(position.sort_value, datetime):
        payload = {"t": "dt", "v": position.sort_value.isoformat()}
    else:
        payload = {"t": "int", "v": int(position.sort_value)}
    payload["id"] = str(position.id)

    raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

def decode_cursor(token: str) -> CursorPosition:
    """
    Reconstruye la posición a partir del token.

    Raises:
        ValidationError: Si el token no es un cursor emitido por la API.
    """
    try:
        padded = token + "=" * (-len(token) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        kind = payload["t"]
        if kind == "dt":
            sort_value = datetime.fromisoformat(payload["v"])
        elif kind == "int":
            sort_value = int(payload["v"])
        else:
            raise ValueError(f"tipo de cursor desconocido: {kind}")
        return CursorPosition(sort_value=sort_value, id=UUID(payload["id"]))
    except (ValueError, KeyError, TypeError, binascii.Error, UnicodeError) as e:
        logger.info(f"Cursor rechazado: {e}")
        raise ValidationError(message="Cursor inválido", details={"cursor": token})


class CursorPager(Generic[T]):
    """
    Algoritmo de paginación keyset.

    Pide a la fuente `limit + 1` elementos posteriores a la posición del cursor,
    ya ordenados por (clave de orden, id ascendente). Si llegan más de `limit`,
    descarta el sobrante y el siguiente cursor apunta al último elemento
    retenido. El orden de la fuente se conserva tal cual.

    Args:
        limit (Optional[int]): Tamaño de página; PAGE_DEFAULT_LIMIT si es None.
        cursor (Optional[str]): Token recibido en la página anterior.

    Raises:
        ValidationError: Si el límite está fuera de rango o el cursor es inválido.
    """
    def __init__(self, limit: Optional[int] = None, cursor: Optional[str] = None):
        self.limit = settings.PAGE_DEFAULT_LIMIT if limit is None else limit
        if not 1 <= self.limit <= settings.PAGE_MAX_LIMIT:
            raise ValidationError(
                message="Límite de página fuera de rango",
                details={"limit": self.limit, "max": settings.PAGE_MAX_LIMIT}
            )
        self.after: Optional[CursorPosition] = decode_cursor(cursor) if cursor else None

    def paginate(
        self,
        fetch: Callable[[Optional[CursorPosition], int], List[T]],
        position_of: Callable[[T], CursorPosition]
    ) -> CursorPage[T]:
        """
        Ejecuta una página.

        Args:
            fetch: Recibe (after, n) y devuelve hasta n elementos en orden.
            position_of: Extrae la posición (clave, id) de un elemento.

        Returns:
            CursorPage[T]: Elementos y cursor siguiente (None al final).
        """
        rows = fetch(self.after, self.limit + 1)
        next_cursor = None
        if len(rows) > self.limit:
            rows = rows[:self.limit]
            next_cursor = encode_cursor(position_of(rows[-1]))
        return CursorPage(items=rows, next_cursor=next_cursor)
