"""AuthContext built from gateway-supplied identity headers."""

import pytest

from marketplace.domain.models.account import Role
from marketplace.security.auth_context import AuthContext
from marketplace.security.exceptions import AuthenticationError


def test_from_claims_normalizes_values():
    auth = AuthContext.from_claims("  acct-1 ", "Admin")
    assert auth.account_id == "acct-1"
    assert auth.role == Role.ADMIN
    assert auth.is_admin is True


def test_customer_is_not_admin():
    assert AuthContext.from_claims("acct-1", "customer").is_admin is False


@pytest.mark.parametrize(
    "account_id,role",
    [(None, "customer"), ("", "customer"), ("acct-1", None), ("acct-1", " "), ("acct-1", "superuser")],
)
def test_missing_or_unknown_claims_rejected(account_id, role):
    with pytest.raises(AuthenticationError):
        AuthContext.from_claims(account_id, role)
