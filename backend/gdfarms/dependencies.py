"""
Shared API dependencies.
"""

from fastapi import Request

from gdfarms.database import Store
from gdfarms.services.user_service import UserService


def get_store(request: Request) -> Store:
    """The Store built by the application factory."""
    return request.app.state.store


def get_user_service(request: Request) -> UserService:
    """UserService carrying the app's new-user defaults."""
    return request.app.state.user_service
