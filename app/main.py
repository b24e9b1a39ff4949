from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from app.api import rentals
from app.core.config import settings
from app.core.exceptions import RentalError
from app.core.metrics import request_count, request_duration, rental_errors, get_metrics_text
from app.services.pricing import CarTypePriceCalculator
from app.services.rental_service import RentalService
from app.services.rental_store import create_rental_store
import time
import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _endpoint_label(request: Request) -> str:
    # route template, so path parameters do not create new series
    route = request.scope.get("route")
    return route.path if route is not None else "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            request_count.labels(
                method=request.method,
                endpoint=_endpoint_label(request),
                status=response.status_code
            ).inc()

            request_duration.labels(
                method=request.method,
                endpoint=_endpoint_label(request)
            ).observe(duration)

            return response
        except Exception:
            duration = time.time() - start_time
            request_count.labels(
                method=request.method,
                endpoint=_endpoint_label(request),
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=_endpoint_label(request)
            ).observe(duration)
            raise


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")

    store = create_rental_store(settings.RENTAL_STORE_BACKEND, settings.DATABASE_URL)
    price_calculator = CarTypePriceCalculator(
        base_day_rental=settings.BASE_DAY_RENTAL,
        base_km_price=settings.BASE_KM_PRICE,
    )
    app.state.rental_service = RentalService(store, price_calculator)
    logger.info(f"Rental service ready ({settings.RENTAL_STORE_BACKEND} store)")

    yield

    logger.info("Application shutting down...")
    app.state.rental_service = None
    store.close()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(MetricsMiddleware)

app.include_router(rentals.router)


@app.exception_handler(RentalError)
async def rental_error_handler(request: Request, exc: RentalError):
    rental_errors.labels(error=exc.error_code).inc()
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.error_code},
    )


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/health", tags=["monitoring"])
async def health_check(request: Request):
    ready = getattr(request.app.state, "rental_service", None) is not None

    return {
        "status": "healthy" if ready else "starting",
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "dependencies": {
            "rental_store": settings.RENTAL_STORE_BACKEND,
        }
    }


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
