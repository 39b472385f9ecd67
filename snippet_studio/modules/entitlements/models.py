"""Access context and entitlement decision value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ADMIN_ROLE = "admin"
ACTIVE_SUBSCRIPTION = "active"


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Caller facts for a single entitlement evaluation; rebuilt on every request."""

    role: str
    subscription_status: Optional[str] = None


@dataclass(frozen=True, slots=True)
class EntitlementDecision:
    authorized: bool
    reason: str
