"""
Controlador base con métodos comunes a todos los controladores.
"""
import logging
from uuid import UUID
from typing import Any, List, Optional, Type, Union
from sqlalchemy import Select, and_, or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.enums import SortDirection
from app.errors import ConflictError, ValidationError
from app.schemas.pagination_schemas import CursorPosition

class BaseController:
    """
    Controlador base para manejar operaciones de base de datos con gestión de sesiones explícita.
    """
    def __init__(self, session: Session) -> None:
        """
        Inicializa el controlador con una sesión de base de datos dedicada y un registrador.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.session = session

    def _validate_uuid(self, value: Union[str, UUID]) -> UUID:
        """
        Normaliza un identificador a UUID.

        Args:
            value (Union[str, UUID]): Identificador recibido.

        Returns:
            UUID: El identificador como UUID.

        Raises:
            ValidationError: Si el valor no es un UUID válido.
        """
        if isinstance(value, UUID):
            return value
        try:
            return UUID(str(value))
        except ValueError:
            raise ValidationError(
                message="Identificador inválido",
                details={"value": str(value)}
            )

    def _commit_or_rollback(self, record: Any) -> bool:
        """
        Helper interno para confirmar un nuevo registro o revertirlo en caso de error.

        Args:
            record (object): La instancia del modelo SQLAlchemy que se guardará.

        Returns:
            bool: Verdadero si la operación fue exitosa, falso en caso contrario.
        """
        try:
            self.session.add(record)
            self.session.commit()
            self.logger.info(f"Successfully committed: {record}")
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"SQLAlchemy Error during commit: {e}")
            return False

    def _insert_or_conflict(self, record: Any) -> Any:
        """
        Inserta un registro señalando explícitamente las violaciones de unicidad.

        Args:
            record (object): La instancia del modelo SQLAlchemy que se insertará.

        Returns:
            object: El registro ya persistido y refrescado.

        Raises:
            ConflictError: Si el INSERT viola una restricción UNIQUE.
        """
        try:
            self.session.add(record)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            self.logger.info(f"Unique violation on insert of {record}: {e.orig}")
            raise ConflictError(
                message="El recurso ya existe",
                details={"table": record.__tablename__}
            )
        self.session.refresh(record)
        self.logger.info(f"Successfully committed: {record}")
        return record

    def _update_or_rollback(self, record: Any) -> bool:
        """
        Helper interno para actualizar un registro existente o revertirlo en caso de error.

        Args:
            record (object): La instancia del modelo SQLAlchemy que se actualizará.

        Returns:
            bool: True si la actualización fue exitosa, False en caso contrario.
        """
        try:
            self.session.add(record)
            self.session.commit()
            self.logger.info(f"Successfully updated: {record}")
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"SQLAlchemy Error during update: {e}")
            return False

    def _delete_or_rollback(self, record: Any) -> bool:
        """
        Helper interno para eliminar un registro o revertirlo en caso de error.

        Args:
            record (object): La instancia del modelo SQLAlchemy que se eliminará.

        Returns:
            bool: True si la eliminación fue exitosa, False en caso contrario.
        """
        try:
            self.session.delete(record)
            self.session.commit()
            self.logger.info(f"Successfully deleted: {record}")
            return True
        except SQLAlchemyError as e:
            self.session.rollback()
            self.logger.error(f"SQLAlchemy Error during deletion: {e}")
            return False

    def _get_item_by_id(self, model: Type[Any], item_id: UUID) -> Optional[Any]:
        """
        Recupera un elemento por su ID de la base de datos utilizando el Mapa de identidad.

        Args:
            model (Type[Any]): La clase de modelo SQLAlchemy para consultar.
            item_id (UUID): La ID primaria del elemento.

        Returns:
            Optional[Any]: La instancia del modelo recuperada o None si no se encuentra/error.
        """
        try:
            item = self.session.get(model, self._validate_uuid(item_id))
            if item:
                self.logger.debug(f"Successfully retrieved {model.__tablename__} ID: {item_id}")
                return item

            self.logger.warning(f"{model.__tablename__} with ID {item_id} not found.")
            return None
        except SQLAlchemyError as e:
            self.logger.error(f"SQLAlchemy Error during retrieval of {model.__tablename__}: {e}")
            return None

    def _list_ordered(
        self,
        stmt: Select,
        sort_column: Any,
        id_column: Any,
        direction: SortDirection,
        limit: int,
        after: Optional[CursorPosition] = None,
        scalars: bool = True
    ) -> List[Any]:
        """
        Consulta por rango ordenada por (sort_column, id) para paginación keyset.

        El orden es `sort_column` en la dirección pedida y `id_column` ascendente como
        desempate. Si se indica `after`, solo se devuelven filas estrictamente posteriores
        a esa posición dentro de ese orden.

        Args:
            stmt (Select): Consulta base con los filtros ya aplicados.
            sort_column: Expresión SQL de la clave de orden.
            id_column: Columna del id usada como desempate.
            direction (SortDirection): Dirección de la clave de orden.
            limit (int): Máximo de filas a devolver.
            after (Optional[CursorPosition]): Posición a partir de la cual continuar.
            scalars (bool): True para devolver la primera entidad de cada fila.

        Returns:
            List[Any]: Entidades (o filas completas si scalars=False) en orden.
        """
        if after is not None:
            if direction == SortDirection.DESC:
                beyond = sort_column < after.sort_value
            else:
                beyond = sort_column > after.sort_value
            stmt = stmt.where(
                or_(beyond, and_(sort_column == after.sort_value, id_column > after.id))
            )

        ordering = sort_column.desc() if direction == SortDirection.DESC else sort_column.asc()
        stmt = stmt.order_by(ordering, id_column.asc()).limit(limit)

        result = self.session.execute(stmt)
        if scalars:
            return list(result.scalars().all())
        return list(result.all())
