"""
test_evaluator.py - export entitlement policy

Authorized iff role is "admin" or subscription status is exactly "active".
"""

import pytest

from snippet_studio.modules.entitlements import AccessContext, EntitlementDecision, evaluate


@pytest.mark.parametrize(
    ("role", "subscription_status", "expected"),
    [
        ("admin", "active", True),
        ("admin", "inactive", True),
        ("admin", None, True),
        ("user", "active", True),
        ("user", "inactive", False),
        ("user", None, False),
    ],
)
def test_authorized_iff_admin_or_active(role, subscription_status, expected):
    decision = evaluate(AccessContext(role=role, subscription_status=subscription_status))

    assert decision.authorized is expected
    assert decision.authorized == (role == "admin" or subscription_status == "active")


def test_missing_status_is_denial_not_error():
    decision = evaluate(AccessContext(role="user"))

    assert decision == EntitlementDecision(authorized=False, reason="subscription required")


@pytest.mark.parametrize("status", ["ACTIVE", "Active", "active ", "grace", "trialing", "past_due", ""])
def test_only_exact_active_counts(status):
    assert evaluate(AccessContext(role="user", subscription_status=status)).authorized is False


@pytest.mark.parametrize("role", ["Admin", "super_admin", "moderator", ""])
def test_only_exact_admin_role_counts(role):
    assert evaluate(AccessContext(role=role, subscription_status="inactive")).authorized is False


def test_reasons_distinguish_grant_paths():
    assert evaluate(AccessContext(role="admin")).reason == "admin role"
    assert evaluate(AccessContext(role="user", subscription_status="active")).reason == "active subscription"


def test_reflects_status_change_between_calls():
    before = evaluate(AccessContext(role="user", subscription_status="active"))
    after = evaluate(AccessContext(role="user", subscription_status="inactive"))

    assert before.authorized is True
    assert after.authorized is False
