"""Error taxonomy shared by the stores and the HTTP layer."""
from fastapi import Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class RegistrarError(Exception):
    """Base exception for the registrar service"""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class DataAccessError(RegistrarError):
    """Connection or statement failure against the database"""
    def __init__(self, message: str = "Database unavailable"):
        super().__init__(message, 503)


class ValidationError(RegistrarError):
    """Malformed input rejected before any statement runs"""
    def __init__(self, message: str, field: str = None):
        self.field = field
        if field:
            message = f"{message} ({field})"
        super().__init__(message, 400)


class NotFoundError(RegistrarError):
    """No row matched the given identifier"""
    def __init__(self, resource: str, id=None):
        message = f"{resource} not found"
        if id is not None:
            message += f" with id: {id}"
        super().__init__(message, 404)


async def registrar_exception_handler(request: Request, exc: RegistrarError):
    logger.error(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "type": exc.__class__.__name__}
    )
