"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from kanowins.config import get_settings
from kanowins.logging_config import configure_logging
from kanowins.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Kanowins",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for the load balancer and local development."""
    return {
        "status": "ok",
        "service": "kanowins",
        "version": "0.1.0",
    }
