"""
Goal Service.

A user has at most one goal. Setting a new one replaces the old one inside a
single transaction, so readers always see either the old or the new goal.
"""

import logging
from typing import Optional

from gdfarms.database import Store
from gdfarms.models.goal import Goal
from gdfarms.schemas import GoalCreate, GoalResponse

logger = logging.getLogger(__name__)


class GoalService:
    def set_goal(self, store: Store, goal_in: GoalCreate) -> GoalResponse:
        """Replace the user's current goal."""
        with store.session_scope() as db:
            removed = (
                db.query(Goal)
                .filter(Goal.user_id == goal_in.user_id)
                .delete(synchronize_session=False)
            )
            goal = Goal(**goal_in.model_dump())
            db.add(goal)
            db.flush()
            db.refresh(goal)
            logger.info(
                f"Set goal {goal.id} for user {goal.user_id} (replaced {removed})"
            )
            return GoalResponse.model_validate(goal)

    def get_current_goal(self, store: Store, user_id: str) -> Optional[GoalResponse]:
        """Most recently created goal, or None."""
        with store.session_scope() as db:
            goal = (
                db.query(Goal)
                .filter(Goal.user_id == user_id)
                .order_by(Goal.created_at.desc(), Goal.id.desc())
                .first()
            )
            if not goal:
                return None
            return GoalResponse.model_validate(goal)


goal_service = GoalService()
