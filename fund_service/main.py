"""Fund Data API - Main Application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import Database
from .routers import stock_router
from .schemas import HealthResponse, InfoResponse

API_NAME = "Fund Data API"
API_VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the Database for the lifetime of the process."""
    db = Database(
        settings.db_config,
        minsize=settings.DB_POOL_MINSIZE,
        maxsize=settings.DB_POOL_MAXSIZE
    )
    app.state.db = db
    logger.info("Database configured: %s", settings.database_label)
    await db.connect()
    print(f"Server is running on http://localhost:{settings.PORT}")
    try:
        yield
    finally:
        await db.close()


# Create FastAPI app
app = FastAPI(
    title=API_NAME,
    description="Look up fund_data rows by ticker symbol",
    version=API_VERSION,
    lifespan=lifespan
)

# Enable CORS for browser frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(stock_router)


@app.get("/health", response_model=HealthResponse)
def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "database": settings.database_label
    }


@app.get("/", response_model=InfoResponse)
def root():
    """Root endpoint with API info."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "endpoints": {
            "stock": "/api/stock/{ticker}",
            "health": "/health"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
