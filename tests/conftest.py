"""
Shared fixtures.

The fake store stands in for the template store interface so that core and
HTTP tests need no database; repository tests use a temporary SQLite file.
"""

import asyncio
from collections.abc import Sequence

import pytest

from snippet_studio.modules.accounts import Account
from snippet_studio.modules.entitlements import AccessContext
from snippet_studio.modules.templates import (
    Template,
    TemplateNotFoundError,
    TemplateStoreUnavailableError,
    TemplateSummary,
)


class FakeTemplateStore:
    """In-memory template store with hooks for failure and latency."""

    def __init__(self, templates: Sequence[Template] = ()) -> None:
        self.templates = {template.id: template for template in templates}
        self.unavailable = False
        self.calls: list[int] = []
        self.gate: asyncio.Event | None = None

    async def get_template(self, template_id: int) -> Template:
        self.calls.append(template_id)
        if self.gate is not None:
            await self.gate.wait()
        if self.unavailable:
            raise TemplateStoreUnavailableError("connection refused")
        try:
            return self.templates[template_id]
        except KeyError:
            raise TemplateNotFoundError(template_id) from None

    async def list_templates(self, category: str | None = None) -> Sequence[TemplateSummary]:
        if self.unavailable:
            raise TemplateStoreUnavailableError("connection refused")
        return [
            TemplateSummary(
                id=template.id,
                title=template.title,
                category=template.category,
                description=template.description,
                tags=template.tags,
                created_at=template.created_at,
            )
            for template in self.templates.values()
            if category is None or template.category == category
        ]


# =============================================================================
# Template Fixtures
# =============================================================================


@pytest.fixture
def fancy_card() -> Template:
    return Template(
        id=1,
        title="Fancy Card",
        category="Cards",
        description="A fancy card",
        code_html="<div>A</div>",
        code_css=".a{color:red}",
        code_js="",
        tags=("card",),
    )


@pytest.fixture
def glow_button() -> Template:
    return Template(
        id=2,
        title="Glow  Button",
        category="Buttons",
        description="Glowing button",
        code_html='<button class="glow">Go</button>',
        code_css=".glow{box-shadow:0 0 8px cyan}",
        code_js="document.querySelector('.glow').onclick = () => alert(1);",
    )


@pytest.fixture
def store(fancy_card: Template, glow_button: Template) -> FakeTemplateStore:
    return FakeTemplateStore([fancy_card, glow_button])


# =============================================================================
# Access Fixtures
# =============================================================================


@pytest.fixture
def admin_ctx() -> AccessContext:
    return AccessContext(role="admin", subscription_status=None)


@pytest.fixture
def subscriber_ctx() -> AccessContext:
    return AccessContext(role="user", subscription_status="active")


@pytest.fixture
def inactive_ctx() -> AccessContext:
    return AccessContext(role="user", subscription_status="inactive")


class FakeAccountRepository:
    """Accounts kept in a dict; tests mutate them to simulate subscription changes."""

    def __init__(self, accounts: Sequence[Account] = ()) -> None:
        self.accounts = {account.id: account for account in accounts}

    async def get_by_id(self, account_id: int) -> Account | None:
        return self.accounts.get(account_id)

    async def get_by_username(self, username: str) -> Account | None:
        return next((a for a in self.accounts.values() if a.username == username), None)

    async def create_account(self, *, username, role, email, is_active, subscription_status, subscription_plan):
        account = Account(
            id=len(self.accounts) + 1,
            username=username,
            role=role,
            is_active=is_active,
            email=email,
            subscription_status=subscription_status,
            subscription_plan=subscription_plan,
        )
        self.accounts[account.id] = account
        return account


@pytest.fixture
def account_repository() -> FakeAccountRepository:
    return FakeAccountRepository(
        [
            Account(id=1, username="admin", role="admin", is_active=True),
            Account(id=2, username="subscriber", role="user", is_active=True, subscription_status="active"),
            Account(id=3, username="lapsed", role="user", is_active=True, subscription_status="inactive"),
            Account(id=4, username="newcomer", role="user", is_active=True),
            Account(id=5, username="banned", role="admin", is_active=False),
        ]
    )
