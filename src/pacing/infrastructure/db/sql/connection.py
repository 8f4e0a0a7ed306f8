import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

DEFAULT_DATABASE_URL = "sqlite:///pacing.db"


def database_url() -> str:
    return os.getenv("PACING_DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


def create_session_factory(url: str | None = None) -> sessionmaker:
    engine = create_engine(url or database_url(), echo=False, future=True)
    return sessionmaker(bind=engine, autoflush=False)
