import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Error obteniendo disponibilidad"


def register_error_handlers(app: FastAPI) -> None:
    """Register the handler turning unreadable bodies into the relay's error envelope."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        return JSONResponse(
            status_code=500,
            content={"message": INVALID_REQUEST_MESSAGE, "error": f"Invalid request body: {details}"},
        )
