# backend/pagecraft/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .utils.logging import store_logger

Base = declarative_base()


def make_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine, relaxing the sqlite thread check for the request pool"""
    store_logger.info(f"Connecting to database: {database_url}")
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=False,
        **kwargs
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
