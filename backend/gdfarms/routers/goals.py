"""
API endpoints for sales goals.
"""

from fastapi import APIRouter, Depends

from gdfarms.database import Store
from gdfarms.dependencies import get_store
from gdfarms.schemas import GoalCreate
from gdfarms.services.goal_service import goal_service

router = APIRouter()


@router.post("")
def set_goal(goal: GoalCreate, store: Store = Depends(get_store)):
    """Replace the user's current goal."""
    saved = goal_service.set_goal(store, goal)
    return {"success": True, "goal": saved}


@router.get("/{user_id}")
def get_current_goal(user_id: str, store: Store = Depends(get_store)):
    """Current goal, or null when none has been set."""
    return {"success": True, "goal": goal_service.get_current_goal(store, user_id)}
