"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import authors, books, entities, nav, reviews
from db import init_db
from settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


# Create app
app = FastAPI(
    title="Reading Journal API",
    description="Books, authors, reviews, quotes and reflections",
    version="0.1.0",
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(entities.router, prefix="/api", tags=["actions"])
app.include_router(books.router, prefix="/books", tags=["books"])
app.include_router(authors.router, prefix="/authors", tags=["authors"])
app.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
app.include_router(nav.router, prefix="/nav", tags=["nav"])


@app.on_event("startup")
def startup_event():
    """Initialize database tables on startup."""
    init_db()
    logger.info("Database ready at %s", settings.DATABASE_URL)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Reading Journal API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
