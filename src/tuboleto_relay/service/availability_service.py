import logging
from typing import Any, Union

from ..utils.tuboleto_client import TuBoletoClient

logger = logging.getLogger(__name__)


class TokenUnavailableError(RuntimeError):
    """Raised when no access token could be obtained for the current request"""


class AvailabilityService:
    def __init__(self, client: TuBoletoClient, location_id: int = 1):
        self.client = client
        self.location_id = location_id

    def get_availability(self, route: Union[str, int, float], year: Union[int, str],
                         month: Union[int, str]) -> Any:
        """
        Authenticate against TuBoleto and query availability for one route and month.

        A token is requested for every call and is never reused.
        """
        token = self.client.get_auth_token()
        if not token:
            raise TokenUnavailableError("Could not obtain an access token")

        logger.info(f"Querying availability for route {route}, {year}-{month}")
        return self.client.get_availability(token, route, year, month, self.location_id)
