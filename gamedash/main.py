"""
Gamification Dashboard API - Main application entry point.

Serves a user's points, streak and badges as JSON and as a dashboard page.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gamedash.core.config import get_settings
from gamedash.core.exceptions import AppException
from gamedash.gamification.views import router as gamification_router
from gamedash.dashboard.views import router as dashboard_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} "
                f"(profile backend: {settings.PROFILE_BACKEND})")
    yield
    logger.info(f"Shutting down {settings.APP_NAME}")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## Gamification Dashboard API

- 🏆 **Profile**: points, streak days, streak multiplier and commands executed
- 🎖️ **Badges**: achievements earned by the user
- 📊 **Dashboard**: an HTML page rendering the profile for a user

    """,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Render application errors as {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# Include routers
app.include_router(gamification_router)
app.include_router(dashboard_router)


@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "profile_backend": settings.PROFILE_BACKEND,
        "version": settings.APP_VERSION,
    }
