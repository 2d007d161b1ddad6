import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment-specific .env file BEFORE any app imports
env = os.getenv("ENV", "local")
dotenv_file = f".env.{env}"
load_dotenv(dotenv_file)

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import AsyncSessionLocal, get_db
from app.middleware import JwtMiddleware, PerformanceMiddleware
from app.routers import payments_router, restaurants_router, users_router
from app.services.auth import get_jwt_service
from app.services.scheduler import scheduler_service
from app.utils import (
    logger,
    configure_sentry,
    capture_exception,
    is_debug,
    API_PREFIX,
)

sentry_enabled = configure_sentry()
if sentry_enabled:
    logger.info("Sentry error tracking initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the promotion sweep with the app and stop it on shutdown."""
    logger.info("Starting background scheduler...")
    await scheduler_service.start()

    yield

    logger.info("Stopping background scheduler...")
    await scheduler_service.stop()


app = FastAPI(
    title="Nuber Eats Backend",
    description="Food delivery accounts, restaurants and promotions API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Added last so it runs first: identity is resolved before timing and routing
app.add_middleware(PerformanceMiddleware)
app.add_middleware(
    JwtMiddleware,
    jwt_service=get_jwt_service(),
    session_factory=AsyncSessionLocal,
)

app.include_router(users_router, prefix=API_PREFIX)
app.include_router(restaurants_router, prefix=API_PREFIX)
app.include_router(payments_router, prefix=API_PREFIX)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {exc}",
        exc_info=True,
    )
    capture_exception(exc)

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            }
        },
    )


@app.get("/")
async def root():
    return {"message": "Welcome to Nuber Eats Backend API", "version": "0.1.0"}


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check endpoint."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "disconnected"

    return {
        "status": "healthy",
        "database": db_status,
        "scheduler": "running" if scheduler_service.running else "stopped",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Nuber Eats Backend (env={env}, debug={is_debug()})")
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=is_debug())
