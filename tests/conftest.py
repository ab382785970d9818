import asyncio
import os
import tempfile
from datetime import datetime, timedelta, timezone
import jwt
import pytest

# must be set before synsplit builds its engine
_tmpdir = tempfile.mkdtemp(prefix="synsplit-tests-")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ["JWT_SECRET"] = "test-secret"

from fastapi.testclient import TestClient
from synsplit.main import app
from synsplit.core.config import settings
from synsplit.db.session import Base, engine
import synsplit.models.group  # noqa: F401
import synsplit.models.group_member  # noqa: F401
import synsplit.models.expense  # noqa: F401
import synsplit.models.pool_contribution  # noqa: F401
import synsplit.models.settlement  # noqa: F401
import synsplit.models.recurring_expense  # noqa: F401

async def _reset_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

def make_token(claims: dict, expires_min: int = 30) -> str:
    # tokens come from the auth provider in production, tests sign their own
    payload = dict(claims, exp=datetime.now(timezone.utc) + timedelta(minutes=expires_min))
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGO)

@pytest.fixture
def client():
    asyncio.run(_reset_db())
    return TestClient(app)

@pytest.fixture
def auth():
    def _headers(uid: str, name: str | None = None):
        token = make_token({"sub": uid, "name": name or uid.title(), "email": f"{uid}@example.com"})
        return {"Authorization": f"Bearer {token}"}
    return _headers

@pytest.fixture
def token():
    return make_token
