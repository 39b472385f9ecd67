"""Domain services for account lookup."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import AccountAlreadyExistsError
from .models import Account, AccountCreateInput
from .repository import AccountRepository


class AccountService:
    """Encapsulates the account use cases the preview service needs."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        # Local import: the SQL repository imports this package.
        from snippet_studio.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_username(self, username: str) -> Account | None:
        return await self._repository.get_by_username(username)

    async def get_active(self, account_id: int) -> Account | None:
        account = await self._repository.get_by_id(account_id)
        if account is None or not account.is_active:
            return None
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise AccountAlreadyExistsError(payload.username)

        return await self._repository.create_account(
            username=payload.username,
            role=payload.role,
            email=payload.email,
            is_active=payload.is_active,
            subscription_status=payload.subscription_status,
            subscription_plan=payload.subscription_plan,
        )
