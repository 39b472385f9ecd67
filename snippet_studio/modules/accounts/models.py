"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Account:
    id: int
    username: str
    role: str
    is_active: bool
    email: Optional[str] = None
    subscription_status: Optional[str] = None
    subscription_plan: Optional[str] = None
    subscription_provider: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class AccountCreateInput:
    username: str
    role: str = "user"
    email: Optional[str] = None
    is_active: bool = True
    subscription_status: Optional[str] = None
    subscription_plan: Optional[str] = None
