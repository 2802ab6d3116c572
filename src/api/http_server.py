"""FastAPI HTTP server setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from config import settings
from manager import CrontabManager

logger = logging.getLogger(__name__)

# Global manager instance
crontab_manager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global crontab_manager

    logger.info("Starting CronKeeper server...")
    crontab_manager = CrontabManager()
    logger.info(f"Managing crontab of {settings.crontab_user or 'current user'}")

    yield

    logger.info("CronKeeper server shut down")
    crontab_manager = None


# Create FastAPI app
app = FastAPI(
    title="CronKeeper",
    description="Read and edit crontab entries over HTTP",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routers
from .endpoints import router

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "CronKeeper",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "crontab": crontab_manager.get_status() if crontab_manager else None
    }
