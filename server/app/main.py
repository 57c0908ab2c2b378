"""
SummaNote - FastAPI Application
Main application entry point
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .api import documents, notes, summarize
from .core.config import settings
from .core.errors import (
    SummaNoteError,
    generic_exception_handler,
    http_exception_handler,
    summanote_error_handler,
)
from .core.logging import quiet_third_party_loggers
from .core.models import HealthResponse
from .core.runtime_state import get_completion_models, get_models_source
from .integrations.openai_models import initialize_completion_models

# Create FastAPI app
app = FastAPI(
    title="SummaNote",
    description="Article summaries and structured notes with normalized markdown output",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.SUMMANOTE_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(SummaNoteError, summanote_error_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register routers
app.include_router(summarize.router)
app.include_router(notes.router)
app.include_router(documents.router)


@app.on_event("startup")
def _startup_init() -> None:
    quiet_third_party_loggers()
    initialize_completion_models()


@app.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        env=settings.SUMMANOTE_ENV,
        completion_models=get_completion_models(),
        models_source=get_models_source(),
    )


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "SummaNote",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/healthz",
    }
