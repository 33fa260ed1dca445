"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsonpulse.api import api_keys, auth, files, preview_url, public_data
from jsonpulse.config import get_settings
from jsonpulse.exceptions import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting JsonPulse ({settings.environment})")
    yield
    logger.info("JsonPulse stopped")


app = FastAPI(
    title="JsonPulse API",
    description="Host JSON documents privately and serve them publicly by API key",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Browsers send the session cookie cross-origin only with credentials enabled
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(api_keys.router)
app.include_router(files.router)
app.include_router(preview_url.router)
app.include_router(public_data.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
