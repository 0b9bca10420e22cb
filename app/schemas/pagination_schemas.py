from uuid import UUID
from datetime import datetime
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar, Union
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

@dataclass(frozen=True)
class CursorPosition:
    """
    Posición de un elemento dentro de un listado ordenado: el valor de la
    clave de orden y el id que desempata cuando dos valores coinciden.

    Args:
        sort_value (Union[datetime, int]): Valor de la clave de orden del elemento.
        id (UUID): ID del elemento (desempate ascendente).
    """
    sort_value: Union[datetime, int]
    id: UUID

class CursorPage(BaseModel, Generic[T]):
    """
    Página de un listado paginado por cursor.

    Args:
        items (List[T]): Elementos de la página en el orden solicitado.
        next_cursor (Optional[str]): Token opaco para pedir la siguiente página, None si no hay más.
    """
    items: List[T]
    next_cursor: Optional[str] = Field(None, description="Cursor opaco de la siguiente página")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "items": [],
                    "next_cursor": "eyJ2IjogIjIwMjUtMDEtMDFUMDA6MDA6MDAiLCAidCI6ICJkdCIsICJpZCI6ICIuLi4ifQ"
                }
            ]
        }
    )

class SuccessResponse(BaseModel):
    """Respuesta genérica de operaciones sin cuerpo propio."""
    success: bool = True
