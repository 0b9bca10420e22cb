"""
Módulo de rutas para los likes.
"""
from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.enums import LikeTargetType
from app.services.likes_service import LikesService
from app.api.dependencies import get_current_user_id, get_likes_service
from app.schemas import CursorPage, LikeCreate, LikeTarget, LikeResponse, MyLikeItem, SuccessResponse

router = APIRouter(tags=["Likes"])

@router.post("/likes", response_model=LikeResponse)
def add_like(
    payload: LikeCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    likes_service: LikesService = Depends(get_likes_service)
):
    """Da like a una foto o un álbum. Repetirlo devuelve el mismo like."""
    return likes_service.add_like(current_user_id, payload.target)

@router.delete("/likes", response_model=SuccessResponse)
def remove_like(
    target_type: LikeTargetType = Query(...),
    target_id: UUID = Query(...),
    current_user_id: UUID = Depends(get_current_user_id),
    likes_service: LikesService = Depends(get_likes_service)
):
    """Quita el like. Responde con éxito aunque no existiera."""
    likes_service.remove_like(current_user_id, LikeTarget(type=target_type, id=target_id))
    return SuccessResponse()

@router.get("/me/likes", response_model=CursorPage[MyLikeItem])
def get_my_likes(
    type: Optional[LikeTargetType] = Query(None),
    limit: Optional[int] = Query(None),
    cursor: Optional[str] = Query(None),
    current_user_id: UUID = Depends(get_current_user_id),
    likes_service: LikesService = Depends(get_likes_service)
):
    """Lista los likes del usuario actual, los más recientes primero."""
    return likes_service.list_my_likes(current_user_id, target_type=type, limit=limit, cursor=cursor)
