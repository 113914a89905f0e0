"""FastAPI application exposing segmented transcripts over HTTP."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transcript_slicer import __version__
from transcript_slicer.api.middleware import CorrelationMiddleware
from transcript_slicer.api.routers import health, transcripts
from transcript_slicer.lib.config_manager import config
from transcript_slicer.lib.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.get("SERVICE_NAME"), config.get("LOG_LEVEL"))
    yield


# Create FastAPI app
app = FastAPI(
    title="Transcript Slicer API",
    description="Segmented YouTube transcripts sized for LLM context windows",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Correlation-ID", "mcp-session-id"],
)
app.add_middleware(CorrelationMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(transcripts.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Transcript Slicer API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "endpoints": {
            "transcript": "GET /transcripts/{video_id}",
            "transcript_search": "GET /transcripts/{video_id}/search?q=",
            "transcript_timestamped": "GET /transcripts/{video_id}/timestamped",
        },
    }


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=host or config.get("API_HOST"),
        port=port or config.get("API_PORT"),
    )


if __name__ == "__main__":
    run()
