"""
Router package for the Fit Journal API.

This package contains all API routers organized by domain:
- health: Liveness check
- auth: Registration and login
- users: The caller's own account
- workouts: Workouts with their exercises and sets
"""

from api.routers.auth import router as auth_router
from api.routers.health import router as health_router
from api.routers.users import router as users_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "auth_router",
    "health_router",
    "users_router",
    "workouts_router",
]
