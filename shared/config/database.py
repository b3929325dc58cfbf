from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
import os
from dotenv import load_dotenv

load_dotenv()

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost") # In Docker, this will be 'postgres'
DB_PORT = os.getenv("POSTGRES_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "pizza")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

# Every table is declared in this schema; SQLite has no schemas so it is mapped away there
DB_SCHEMA = "pizza_schema"


def schema_translate_map(url: str) -> dict:
    if url.startswith("sqlite"):
        return {DB_SCHEMA: None}
    return {}


def build_engine(url: str = DATABASE_URL, **kwargs):
    """Create an async engine with the schema mapping that fits the backend."""
    return create_async_engine(
        url,
        echo=DB_ECHO,
        execution_options={"schema_translate_map": schema_translate_map(url)},
        **kwargs,
    )


engine = build_engine()

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
