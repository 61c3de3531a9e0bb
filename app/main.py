"""FastAPI application entrypoint."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import init_db
from app.errors import (
    PromptBuilderError,
    prompt_builder_error_handler,
    request_validation_error_handler,
)
from app.routers import collections, templates, variables

# ── Logging setup ────────────────────────────────────────────────────
_log_level = os.environ.get("PROMPTBUILDER_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()
    logger.info("Prompt builder API ready (env=%s)", settings.env)

    yield


app = FastAPI(
    title="Prompt Builder",
    description="Collections, prompt templates and their variables",
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

app.add_exception_handler(PromptBuilderError, prompt_builder_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# Mount routers
app.include_router(collections.router, prefix="/api/collections", tags=["collections"])
app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
app.include_router(
    variables.router, prefix="/api/templates/{template_id}/variables", tags=["variables"]
)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "promptbuilder"}
