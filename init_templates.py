"""
Seed a fresh database with an admin account and a demo template,
then print a bearer token for the admin so downloads can be tried locally.
"""
import asyncio

from snippet_studio.core.security import create_access_token
from snippet_studio.infrastructure.database import get_session, init_db
from snippet_studio.infrastructure.database.repositories import SqlTemplateRepository
from snippet_studio.modules.accounts import AccountCreateInput, AccountService

DEMO_TEMPLATE = {
    "title": "Fancy Card",
    "category": "Cards",
    "description": "A card with a soft shadow that lifts on hover.",
    "code_html": '<div class="card">\n  <h3>Fancy Card</h3>\n  <p>Hover me</p>\n</div>',
    "code_css": (
        ".card { padding: 24px; border-radius: 12px; box-shadow: 0 4px 12px rgba(0,0,0,.15);"
        " transition: transform .2s; }\n.card:hover { transform: translateY(-4px); }"
    ),
    "code_js": "document.querySelector('.card').addEventListener('click', () => console.log('clicked'));",
    "tags": ["card", "hover"],
}


async def seed():
    await init_db()

    async for db in get_session():
        accounts = AccountService.with_session(db)
        admin = await accounts.get_by_username("admin")
        if admin is None:
            admin = await accounts.create_account(
                AccountCreateInput(username="admin", role="admin", email="admin@example.com")
            )
            print("Created admin account")

        templates = SqlTemplateRepository(db)
        existing = await templates.list_templates("Cards")
        if not any(summary.title == DEMO_TEMPLATE["title"] for summary in existing):
            template = await templates.create(**DEMO_TEMPLATE, created_by=admin.id)
            print(f"Created demo template #{template.id}: {template.title}")

        await db.commit()

        print("=" * 50)
        print("Admin bearer token:")
        print(create_access_token(admin.id, admin.role))
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(seed())
