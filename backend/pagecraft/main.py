# backend/pagecraft/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import documents_router, pages_router, paragraphs_router
from .config import settings
from .storage import DocumentStore, build_store
from .utils.logging import api_logger


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the API around `store`, or around the configured backend when omitted"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            app.state.store = build_store(settings)
        yield

    app = FastAPI(title="Pagecraft API", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(documents_router)
    app.include_router(pages_router)
    app.include_router(paragraphs_router)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        api_logger.warning("Rejected malformed request", extra={
            "path": request.url.path,
            "method": request.method,
            "errors": jsonable_encoder(exc.errors())
        })
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request payload", "errors": jsonable_encoder(exc.errors())}
        )

    @app.get("/")
    async def root():
        return {"message": "Pagecraft API is running"}

    return app


app = create_app()
