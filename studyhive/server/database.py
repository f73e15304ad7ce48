# studyhive/server/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from studyhive.server.config import DATABASE_URL
from studyhive.server.core.store import Store, memory_store, sql_store
from studyhive.server.models import Base


def create_session_factory(url: str) -> sessionmaker:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args)
    init_db(engine)
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )


def init_db(engine):
    Base.metadata.create_all(bind=engine)


def build_store(url: str | None = DATABASE_URL) -> Store:
    """
    SQLAlchemy-backed store when a database URL is configured,
    process memory otherwise.
    """
    if url:
        return sql_store(create_session_factory(url))
    return memory_store()
