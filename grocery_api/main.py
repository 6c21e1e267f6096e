"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from grocery_api.api import auth, history, items, recommendations
from grocery_api.config import get_settings
from grocery_api.database import get_db, init_db
from grocery_api.exceptions import GroceryError, StoreError
from grocery_api.logging_config import RequestLoggingMiddleware, setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    setup_logging(settings.log_level)
    if settings.auto_create_tables:
        logger.info("Creating database tables")
        init_db()
    yield


app = FastAPI(
    title="Grocery Tracker API",
    description="Grocery list, purchase history and co-purchase recommendations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(GroceryError)
async def grocery_error_handler(request: Request, exc: GroceryError) -> JSONResponse:
    """Render domain errors as JSON with their mapped status code."""
    body = {"ok": False, "error": exc.message}
    if isinstance(exc, StoreError):
        logger.error(f"{request.method} {request.url.path} store error: {exc.details}")
        if "error" in exc.details:
            body["detail"] = exc.details["error"]
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request fields as 400."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{location}: {errors[0].get('msg', 'invalid value')}" if location else message
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "error": "Internal server error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(items.router)
app.include_router(history.router)
app.include_router(recommendations.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


@app.get("/api/test-db")
def database_check(db: Annotated[Session, Depends(get_db)]):
    """Check that the database answers a query."""
    try:
        now = db.execute(select(func.now())).scalar()
    except SQLAlchemyError as e:
        logger.error(f"Database test failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"connected": False, "error": str(e)},
        )
    return {"connected": True, "time": str(now)}
