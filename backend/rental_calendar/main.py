"""Rental Calendar: FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rental_calendar.api.v1.availability import router as availability_router
from rental_calendar.api.v1.calendar import router as calendar_router
from rental_calendar.api.v1.reservations import router as reservations_router
from rental_calendar.config import settings

# Configure root logger so all rental_calendar.* loggers output to stderr.
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Share one HTTP connection pool with the collaborator clients."""
    async with httpx.AsyncClient(timeout=settings.request_timeout_seconds) as client:
        app.state.http_client = client
        yield
        app.state.http_client = None


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Reservation calendar, occupancy statistics and article availability for a rental business.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(calendar_router)
app.include_router(availability_router)
app.include_router(reservations_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
