import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.api import catalog_routes
from app.core.config import settings
from app.database import Base

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Static files directory - use absolute path from project root
BASE_DIR = Path(__file__).resolve().parent.parent
static_dir = BASE_DIR / "static"


def mask_url_password(url: str) -> str:
    """Mask password in URL for logging."""
    from urllib.parse import urlparse
    try:
        parsed = urlparse(url)
    except ValueError:
        return url
    if parsed.password:
        return url.replace(f":{parsed.password}@", ":****@")
    return url


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the catalog database and create the Products table if it is missing."""
    provider = app.dependency_overrides.get(
        catalog_routes.get_product_gateway, catalog_routes.get_product_gateway
    )
    gateway = provider()
    database_url = mask_url_password(gateway.database_url or str(gateway.engine.url))
    try:
        engine = gateway.engine
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info(f"Connected to database: {database_url}")
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        # The page still serves; every reload reports the storage error
        logger.warning(f"Database unavailable at startup ({database_url}): {e}")
    
    yield


app = FastAPI(lifespan=lifespan)

# Mount static files first (before routes)
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

# Include routers
app.include_router(catalog_routes.router)


@app.get("/")
async def root():
    """Serve the catalog page."""
    return FileResponse(
        static_dir / "index.html",
        media_type="text/html"
    )
