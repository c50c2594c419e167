import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from numvec.api import health, vector
from numvec.core.errors import VectorError
from numvec.observability.metrics import MetricsMiddleware, VECTOR_ERROR_COUNT, metrics_router
from numvec.observability.logging import setup_logging
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)

# READY_FLAG is True between lifespan startup and shutdown
READY_FLAG = False

@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    READY_FLAG = True
    yield
    READY_FLAG = False

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="numvec",
        version="1.0.0",
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)  # Add Prometheus metrics middleware
    app.include_router(metrics_router)     # Expose /metrics endpoint
    app.include_router(health.router)      # Expose /health and /ready endpoints
    app.include_router(vector.router)      # Expose /vector/* endpoints
    app.state.ready_flag = lambda: READY_FLAG

    # Malformed request bodies are reported as 400, not FastAPI's default 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Validator errors carry the raised exception in their context; render it as text
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, list):
                return [serialize_error(e) for e in err]
            return err
        return JSONResponse(
            status_code=400,
            content={"detail": serialize_error(exc.errors())},
        )

    # Errors raised by the vector core (size mismatch, empty vector, ...)
    @app.exception_handler(VectorError)
    async def vector_exception_handler(request: Request, exc: VectorError):
        kind = type(exc).__name__
        logger.warning("%s %s rejected: %s: %s", request.method, request.url.path, kind, exc)
        VECTOR_ERROR_COUNT.labels(kind).inc()
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "kind": kind},
        )

    return app

# Create the FastAPI app instance
app = create_app()
