"""Entitlement evaluation for code export."""

from .evaluator import REASON_SUBSCRIPTION_REQUIRED, evaluate
from .models import AccessContext, EntitlementDecision

__all__ = [
    "AccessContext",
    "EntitlementDecision",
    "REASON_SUBSCRIPTION_REQUIRED",
    "evaluate",
]
