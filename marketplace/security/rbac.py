"""Role-based access control. No FastAPI."""

from marketplace.domain.models.account import Role
from marketplace.security.exceptions import AuthorizationError

# Permission matrix:
# Role      Apply  Submit  ViewOwn  Review
# CUSTOMER  ✓      ✓       ✓        ✗
# SELLER    ✓      ✓       ✓        ✗
# ADMIN     ✗      ✗       ✓        ✓
#
# Submit is open to customers so the service can answer "not an approved seller"
# from the stored account instead of the caller's claimed role.

_ACTION_PERMISSIONS: dict[tuple[Role, str], bool] = {
    (Role.CUSTOMER, "apply"): True,
    (Role.CUSTOMER, "submit"): True,
    (Role.CUSTOMER, "view_own"): True,
    (Role.CUSTOMER, "review"): False,
    (Role.SELLER, "apply"): True,
    (Role.SELLER, "submit"): True,
    (Role.SELLER, "view_own"): True,
    (Role.SELLER, "review"): False,
    (Role.ADMIN, "apply"): False,
    (Role.ADMIN, "submit"): False,
    (Role.ADMIN, "view_own"): True,
    (Role.ADMIN, "review"): True,
}


class RBACService:
    """Check permission for role and action. Raise AuthorizationError if invalid."""

    def check_permission(self, role: Role, action: str) -> None:
        """Raises AuthorizationError if role does not have permission for action."""
        key = (role, action)
        if key not in _ACTION_PERMISSIONS or not _ACTION_PERMISSIONS[key]:
            raise AuthorizationError(
                f"Role {role.value} does not have permission for action '{action}'"
            )
