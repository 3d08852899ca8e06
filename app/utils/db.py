# app/utils/db.py
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from app.utils.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=False,  # Set to True to see SQL queries
)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def init_db():
    """Creates the quiz tables if they don't exist yet."""
    # Imported here so the record classes register on Base.metadata first
    from app.models.records import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def get_db() -> AsyncSession:
    """
    Dependency yielding one database session per request.
    The session is closed when the request finishes.
    """
    async with AsyncSessionLocal() as session:
        yield session
