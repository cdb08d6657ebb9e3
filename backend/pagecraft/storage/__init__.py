# backend/pagecraft/storage/__init__.py
from fastapi import Request

from ..config import Settings
from ..database import Base, make_engine, make_session_factory
from ..utils.logging import store_logger
from .base import DocumentStore
from .memory import MemoryStore
from .seed import seed_sample_data
from .sql import SqlStore


def build_store(settings: Settings) -> DocumentStore:
    """Create the configured backend and optionally seed it"""
    store_logger.info("Building document store", extra={
        "backend": settings.STORAGE_BACKEND,
        "seed": settings.SEED_SAMPLE_DATA
    })

    if settings.STORAGE_BACKEND == "sql":
        engine = make_engine(settings.DATABASE_URL)
        Base.metadata.create_all(bind=engine)
        store: DocumentStore = SqlStore(make_session_factory(engine))
        # Seed only an empty database so restarts don't duplicate the sample
        should_seed = settings.SEED_SAMPLE_DATA and not store.list_documents()
    else:
        store = MemoryStore()
        should_seed = settings.SEED_SAMPLE_DATA

    if should_seed:
        seed_sample_data(store)
    return store


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store attached to the running app"""
    return request.app.state.store


__all__ = [
    "DocumentStore",
    "MemoryStore",
    "SqlStore",
    "build_store",
    "get_store",
    "seed_sample_data"
]
