"""
Tests for goal replacement
"""
import threading
from datetime import date

import pytest

from gdfarms.models.goal import Goal
from gdfarms.schemas import GoalCreate
from gdfarms.services.goal_service import goal_service


@pytest.mark.unit
class TestGoalService:
    """Tests for GoalService"""

    def test_no_goal(self, store, user_id):
        assert goal_service.get_current_goal(store, user_id) is None

    def test_set_goal_twice_keeps_only_second(self, store, user_id):
        goal_service.set_goal(
            store,
            GoalCreate(userId=user_id, name="Q1", targetRevenue=1000, targetProfit=200),
        )
        second = goal_service.set_goal(
            store,
            GoalCreate(
                userId=user_id,
                name="Q2",
                targetRevenue=5000,
                targetProfit=900,
                targetItems=40,
                deadline="2026-12-31",
                description="Christmas season",
            ),
        )

        with store.session_scope() as db:
            rows = db.query(Goal).filter(Goal.user_id == user_id).all()
            assert len(rows) == 1

        current = goal_service.get_current_goal(store, user_id)
        assert current == second
        assert current.name == "Q2"
        assert current.target_revenue == 5000
        assert current.target_profit == 900
        assert current.target_items == 40
        assert current.deadline == date(2026, 12, 31)
        assert current.description == "Christmas season"

    def test_goals_are_per_user(self, store, user_id, other_user_id):
        goal_service.set_goal(store, GoalCreate(userId=user_id, name="Mine"))
        goal_service.set_goal(store, GoalCreate(userId=other_user_id, name="Theirs"))

        assert goal_service.get_current_goal(store, user_id).name == "Mine"
        assert goal_service.get_current_goal(store, other_user_id).name == "Theirs"


@pytest.mark.integration
def test_readers_never_see_missing_goal_during_replacement(file_store, user_service):
    """Test that delete-then-insert is atomic for concurrent readers"""
    user_id = user_service.init_user(file_store).user_id
    goal_service.set_goal(file_store, GoalCreate(userId=user_id, name="goal-0"))

    done = threading.Event()
    misses = []
    errors = []

    def writer():
        try:
            for i in range(1, 30):
                goal_service.set_goal(
                    file_store, GoalCreate(userId=user_id, name=f"goal-{i}")
                )
        except Exception as exc:  # surfaced through the errors list
            errors.append(exc)
        finally:
            done.set()

    def reader():
        try:
            while not done.is_set():
                if goal_service.get_current_goal(file_store, user_id) is None:
                    misses.append(True)
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer)] + [
        threading.Thread(target=reader) for _ in range(3)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    assert errors == []
    assert misses == []
    assert goal_service.get_current_goal(file_store, user_id).name == "goal-29"
