import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_DENIED_MESSAGE = "Acceso no permitido por CORS"


def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    """
    Decide whether a request with the given Origin header may proceed.

    :param origin: Value of the Origin header, None when the caller is not a browser
    :param allowed_origins: Exact origins accepted
    :return: True for an absent origin or an exact member of the allow-list
    """
    if not origin:
        return True
    return origin in allowed_origins


def origin_gate(allowed_origins: Iterable[str]):
    """Build an HTTP middleware rejecting requests from unknown origins."""
    allowed = frozenset(allowed_origins)

    async def gate(request: Request, call_next):
        origin = request.headers.get("origin")
        if not is_origin_allowed(origin, allowed):
            logger.warning(f"Rejected request to {request.url.path} from origin {origin}")
            return JSONResponse(status_code=403, content={"message": CORS_DENIED_MESSAGE})
        return await call_next(request)

    return gate
