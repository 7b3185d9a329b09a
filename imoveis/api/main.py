"""
Imoveis FastAPI main
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from imoveis import __version__
from imoveis.api.routes import router
from imoveis.config import settings, setup_logging
from imoveis.data_sources.store import ListingStoreError

setup_logging()

app = FastAPI(
    title="Imoveis",
    description="Property listing search: filter and rank marketplace listings",
    version=__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(router, prefix="/api/v1")


@app.exception_handler(ListingStoreError)
async def listing_store_error_handler(request: Request, exc: ListingStoreError):
    logger.error(f"Listing store error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Listing store unavailable"})


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": "Imoveis",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "env": settings.ENV,
    }
