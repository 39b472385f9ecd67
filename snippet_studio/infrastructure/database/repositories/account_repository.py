"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snippet_studio.infrastructure.database.models import Account as AccountModel
from snippet_studio.modules.accounts.models import Account


class SqlAccountRepository:
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: int) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_account(
        self,
        *,
        username: str,
        role: str,
        email: str | None,
        is_active: bool,
        subscription_status: str | None,
        subscription_plan: str | None,
    ) -> Account:
        model = AccountModel(
            username=username,
            role=role,
            email=email,
            is_active=is_active,
            subscription_status=subscription_status,
            subscription_plan=subscription_plan,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=model.id,
            username=model.username,
            role=model.role or "user",
            is_active=bool(model.is_active),
            email=model.email,
            subscription_status=model.subscription_status,
            subscription_plan=model.subscription_plan,
            subscription_provider=model.subscription_provider,
            created_at=model.created_at,
        )
