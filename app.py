import logging

from dotenv import load_dotenv
load_dotenv()  # Load .env file before importing settings

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.exceptions import GTFSQueryError
from core.rate_limiter import limiter, rate_limit_exceeded_handler, RateLimits

logger = logging.getLogger(__name__)


async def gtfs_query_error_handler(request: Request, exc: GTFSQueryError) -> JSONResponse:
    """Map query errors (NotFoundError, InputError) to their HTTP status."""
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    else:
        logger.info(f"{request.url.path}: {exc.status_code} {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Settings validation is done automatically in core/config.py on import
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="GTFS Shapes API",
        description="Read-only GTFS shapes (GeoJSON) and fare rules",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )

    # CORS middleware - Public API, no credentials needed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Query errors
    app.add_exception_handler(GTFSQueryError, gtfs_query_error_handler)

    # Register routers
    from adapters.http.api.gtfs.routers import shape_router, fare_router
    app.include_router(shape_router, prefix="/api/v1")
    app.include_router(fare_router, prefix="/api/v1")

    @app.get("/health")
    @limiter.limit(RateLimits.HEALTH)
    def health_check(request: Request, db: Session = Depends(get_db)):
        """Health check endpoint.

        Returns 503 while the database is unreachable.
        """
        try:
            db.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return JSONResponse(
                status_code=503,
                content={"status": "unavailable", "message": "Database is not reachable"},
            )

        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    return app


app = create_app()
