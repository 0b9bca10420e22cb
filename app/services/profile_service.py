"""
Estadísticas de perfil.
"""
import logging
from uuid import UUID
from sqlalchemy.orm import Session

from app.controllers.user_controller import UserController
from app.schemas import ProfileStats

class ProfileService:
    """
    Calcula las estadísticas de contenido de un usuario.
    """
    def __init__(self, session: Session):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.user_controller = UserController(session)

    def stats(self, user_id: UUID) -> ProfileStats:
        """
        Devuelve photo_count (fotos propias) y received_like_count (likes sobre
        esas fotos), leídos en una única consulta.

        Args:
            user_id (UUID): ID del usuario.

        Returns:
            ProfileStats: Las dos cuentas.
        """
        stats = self.user_controller.get_profile_stats(user_id)
        self.logger.debug(f"Stats de {user_id}: {stats.photo_count} fotos, {stats.received_like_count} likes")
        return stats
