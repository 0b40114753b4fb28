"""
API endpoints for anonymous user bootstrap.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from gdfarms.database import Store
from gdfarms.dependencies import get_store, get_user_service
from gdfarms.schemas import UserInitRequest
from gdfarms.services.user_service import UserService


def create_router(limiter: Limiter, init_rate_limit: str) -> APIRouter:
    """Build the router with the app's own limiter and limit string."""
    router = APIRouter()

    @router.post("/init")
    @limiter.limit(init_rate_limit)
    def init_user(
        request: Request,
        payload: Optional[UserInitRequest] = None,
        store: Store = Depends(get_store),
        user_service: UserService = Depends(get_user_service),
    ):
        """
        Create a user, or confirm an existing one when a known userId is sent.
        """
        user_id = payload.user_id if payload else None
        result = user_service.init_user(store, user_id)
        return {"success": True, "userId": result.user_id, "created": result.created}

    return router
