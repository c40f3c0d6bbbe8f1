"""Security tests: RBAC permission matrix fully tested."""

import pytest

from marketplace.domain.models.account import Role
from marketplace.security.exceptions import AuthorizationError
from marketplace.security.rbac import RBACService


@pytest.fixture
def rbac():
    return RBACService()


# Permission matrix:
# Role      Apply  Submit  ViewOwn  Review
# CUSTOMER  ✓      ✓       ✓        ✗
# SELLER    ✓      ✓       ✓        ✗
# ADMIN     ✗      ✗       ✓        ✓


@pytest.mark.parametrize("role", [Role.CUSTOMER, Role.SELLER])
def test_non_admins_apply_submit_view_but_not_review(rbac, role):
    rbac.check_permission(role, "apply")
    rbac.check_permission(role, "submit")
    rbac.check_permission(role, "view_own")
    with pytest.raises(AuthorizationError):
        rbac.check_permission(role, "review")


def test_admin_reviews_but_does_not_apply_or_submit(rbac):
    rbac.check_permission(Role.ADMIN, "review")
    rbac.check_permission(Role.ADMIN, "view_own")
    with pytest.raises(AuthorizationError):
        rbac.check_permission(Role.ADMIN, "apply")
    with pytest.raises(AuthorizationError):
        rbac.check_permission(Role.ADMIN, "submit")


def test_unknown_action_denied(rbac):
    with pytest.raises(AuthorizationError) as exc_info:
        rbac.check_permission(Role.ADMIN, "delete_everything")
    assert "delete_everything" in exc_info.value.message
