"""Security: caller identity and RBAC. No FastAPI."""

from marketplace.security.auth_context import AuthContext
from marketplace.security.rbac import RBACService

__all__ = [
    "AuthContext",
    "RBACService",
]
