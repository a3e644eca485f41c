import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1.router import api_router
from app.services.adp_catalog import resolve_adp_path

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the catalog is read per request, only check the source is there
    adp_path = resolve_adp_path(settings.default_scoring_type)
    if adp_path.exists():
        logger.info(f"Using ADP data from {adp_path}")
    else:
        logger.warning(f"ADP data file {adp_path} not found; recommendations will be empty")

    yield


app = FastAPI(
    title=settings.app_name,
    description="Fantasy Football Draft Assistant with ADP-based recommendations and draft grading",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name}
