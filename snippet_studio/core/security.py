"""Bearer token verification and per-request access context."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from snippet_studio.core.config import get_settings
from snippet_studio.interfaces.http.deps import get_account_service
from snippet_studio.modules.accounts import Account, AccountService
from snippet_studio.modules.entitlements import AccessContext
from snippet_studio.schemas import TokenData

security = HTTPBearer(auto_error=False)


def create_access_token(account_id: int, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a token. Sessions are issued upstream; this exists for tooling and tests."""
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(account_id),
        "role": role,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return TokenData(account_id=int(subject))


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    account_service: AccountService = Depends(get_account_service),
) -> Account:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token_data = decode_access_token(credentials.credentials)
    # Re-read on every request: role and subscription may change at any time.
    account = await account_service.get_active(token_data.account_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account does not exist or is disabled")
    return account


async def get_access_context(account: Account = Depends(get_current_account)) -> AccessContext:
    return AccessContext(role=account.role, subscription_status=account.subscription_status)
