# credvault/database.py

from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from credvault.models import Base


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    database = url.database
    if not database or database == ":memory:":
        # One shared connection, otherwise every session sees its own empty database
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args={"check_same_thread": False})


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )


def init_db(engine: Engine):
    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
