"""HTTP routers.

Exports:
    auth_router: /auth endpoints
    users_router: /users endpoints (owner-only)
    system_router: root banner and health check
"""

from src.presentation.routers.auth import auth_router
from src.presentation.routers.system import system_router
from src.presentation.routers.users import users_router

__all__ = ["auth_router", "system_router", "users_router"]
