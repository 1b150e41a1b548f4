import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..model.availability_request import AvailabilityRequest
from ..model.availability_response import AvailabilityResponse, ErrorResponse
from ..service.availability_service import AvailabilityService, TokenUnavailableError
from ..utils.tuboleto_client import TuBoletoApiError

router = APIRouter()

logger = logging.getLogger(__name__)

TOKEN_ERROR_MESSAGE = "Error al obtener el token de autenticación"
AVAILABILITY_ERROR_MESSAGE = "Error obteniendo disponibilidad"
SUCCESS_MESSAGE = "✅ Datos obtenidos correctamente"


def get_service() -> AvailabilityService:
    from ..app import availability_service
    return availability_service


@router.get("/")
def root():
    """Health check endpoint"""
    return {"message": "TuBoleto relay is running"}


@router.post("/api/availability", response_model=AvailabilityResponse,
             responses={500: {"model": ErrorResponse}})
def get_availability(request: Optional[AvailabilityRequest] = None,
                     service: AvailabilityService = Depends(get_service)):
    """
    Relay the available spaces for a route and month from TuBoleto
    """
    request = request or AvailabilityRequest()
    try:
        data = service.get_availability(request.route, request.year, request.month)
        return AvailabilityResponse(message=SUCCESS_MESSAGE, data=data)

    except TokenUnavailableError:
        return JSONResponse(status_code=500, content={"message": TOKEN_ERROR_MESSAGE})

    except TuBoletoApiError as e:
        logger.error(f"Error obtaining availability: {e.details or e}")
        return JSONResponse(status_code=500,
                            content={"message": AVAILABILITY_ERROR_MESSAGE, "error": str(e)})

    except Exception as e:
        logger.exception(f"Error obtaining availability: {e}")
        return JSONResponse(status_code=500,
                            content={"message": AVAILABILITY_ERROR_MESSAGE, "error": str(e)})
