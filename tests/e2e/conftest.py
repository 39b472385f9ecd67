"""
HTTP fixtures: the real application with the store and account
dependencies swapped for in-memory fakes.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from snippet_studio.core.security import create_access_token
from snippet_studio.interfaces.http.deps import get_account_service, get_template_store
from snippet_studio.main import create_app
from snippet_studio.modules.accounts import AccountService


@pytest.fixture
def app(store, account_repository) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_template_store] = lambda: store
    app.dependency_overrides[get_account_service] = lambda: AccountService(account_repository)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # No context manager: the lifespan (database bootstrap) is not needed.
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Build bearer headers the way the upstream session service would."""

    def _headers(account_id: int, role: str = "user") -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(account_id, role)}"}

    return _headers
