import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from octo_connector.api.routers.connector import router as connector_router
from octo_connector.api.routers.health import router as health_router
from octo_connector.domain.errors import (
    DomainError,
    InvalidAvailabilityKeyError,
    ProductNotFoundError,
    SupplierError,
    ValidationError,
)

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="OCTO Connector",
    version="0.1.0",
)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, (ValidationError, InvalidAvailabilityKeyError)):
        return 400
    if isinstance(exc, ProductNotFoundError):
        return 404
    if isinstance(exc, SupplierError):
        if exc.status_code and 400 <= exc.status_code < 500:
            return exc.status_code
        return 502
    return 400


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = _status_for(exc)
    logger.warning(
        "Operation rejected",
        extra={"path": request.url.path, "error_code": exc.code, "status_code": status_code},
    )
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, SupplierError) and exc.supplier_error_code:
        content["supplier_error"] = exc.supplier_error_code
    return JSONResponse(status_code=status_code, content=content)


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(connector_router, prefix="/api/v1", tags=["Connector"])
