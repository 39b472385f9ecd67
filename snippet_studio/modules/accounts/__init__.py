"""Account domain services and models."""

from .exceptions import AccountAlreadyExistsError, AccountError
from .models import Account, AccountCreateInput
from .service import AccountService

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountService",
    "AccountError",
    "AccountAlreadyExistsError",
]
