"""Export entitlement policy."""

from __future__ import annotations

from .models import ACTIVE_SUBSCRIPTION, ADMIN_ROLE, AccessContext, EntitlementDecision

REASON_ADMIN = "admin role"
REASON_SUBSCRIBED = "active subscription"
REASON_SUBSCRIPTION_REQUIRED = "subscription required"


def evaluate(ctx: AccessContext) -> EntitlementDecision:
    """Decide whether the caller may export code.

    Only an admin role or a subscription status of exactly ``"active"``
    authorizes. A missing status is a denial, not an error. The result must
    not be cached: subscription state can change between two calls.
    """
    if ctx.role == ADMIN_ROLE:
        return EntitlementDecision(authorized=True, reason=REASON_ADMIN)
    if ctx.subscription_status == ACTIVE_SUBSCRIPTION:
        return EntitlementDecision(authorized=True, reason=REASON_SUBSCRIBED)
    return EntitlementDecision(authorized=False, reason=REASON_SUBSCRIPTION_REQUIRED)
