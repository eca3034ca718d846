# client_admin/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from client_admin.adapters.configuration.config import settings
from client_admin.adapters.outbound.persistence.database import create_schema

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    logger.info("Application starting up...")

    # Create database tables if they don't exist
    await create_schema()

    yield

    logger.info("Application shutting down...")


# Create FastAPI instance
app = FastAPI(
    title="Client Admin",
    description="OAuth2/OIDC client configuration administration",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Middlewares
from client_admin.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)

# Routers
from client_admin.adapters.inbound.api.v1.router import api_router

app.include_router(api_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")
