"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mongoengine.errors import FieldDoesNotExist, OperationError
from pymongo.errors import PyMongoError
from sqlalchemy.exc import SQLAlchemyError

from namcol.api import auth, progress, recipes, users
from namcol.config import get_settings
from namcol.document_store import init_document_store
from namcol.errors import NamColError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_document_store()
    yield


app = FastAPI(
    title="ÑamCol API",
    description="Recipe tracking backend: accounts, password resets and cooking progress",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NamColError)
async def namcol_error_handler(request: Request, exc: NamColError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
@app.exception_handler(PyMongoError)
@app.exception_handler(OperationError)
@app.exception_handler(FieldDoesNotExist)
async def store_error_handler(request: Request, exc: Exception):
    """Store failures become an opaque 500; details only go to the log."""
    logger.error(
        f"Store error on {request.method} {request.url.path}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(recipes.router)
app.include_router(progress.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
