from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from synsplit.core.config import settings

engine_kwargs = {"echo": settings.SQL_ECHO}

# aiosqlite connections must not outlive the event loop that opened them
if settings.DATABASE_URL.startswith("sqlite"):
    engine_kwargs["poolclass"] = pool.NullPool

engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()

async def get_db():
    async with async_session() as session:
        yield session
