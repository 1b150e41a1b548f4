import logging
from typing import Any, Dict, Optional, Union

import requests

logger = logging.getLogger(__name__)


class TuBoletoApiError(RuntimeError):
    """Failure talking to the TuBoleto API, with whatever the upstream returned"""

    def __init__(self, message: str, status: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.status = status
        self.details = details


def _response_body(response: Optional[requests.Response]) -> Any:
    """Best effort decoding of an upstream body for logs and errors"""
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text or None


class TuBoletoClient:
    def __init__(self, auth_url: str, api_url: str, username: Optional[str], password: Optional[str],
                 verify_ssl: bool = False, timeout: Optional[float] = None):
        """
        Initialize the TuBoleto API client.

        Certificate verification is configured on this client's session only,
        other outbound connections of the process keep their own settings.

        :param auth_url: Login endpoint returning the access token
        :param api_url: Availability endpoint
        :param username: Service account username
        :param password: Service account password
        :param verify_ssl: Verify the upstream TLS certificate
        :param timeout: Optional timeout in seconds for each call, None waits indefinitely
        """
        self.auth_url = auth_url
        self.api_url = api_url
        self.username = username
        self.password = password
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = verify_ssl

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response

    def get_auth_token(self) -> Any:
        """
        Log in with the service credentials and return a fresh access token.

        :return: The access token, or None when it could not be obtained
        """
        try:
            response = self._request(
                "POST",
                self.auth_url,
                json={"username": self.username, "password": self.password},
                headers={"Content-Type": "application/json"},
            )
            token = response.json()["body"]["access_token"]
        except requests.RequestException as e:
            logger.error(f"Error obtaining token: {_response_body(e.response) or e}")
            return None
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Error obtaining token, unexpected auth response: {e!r}")
            return None

        if not token:
            logger.error("Error obtaining token, empty access token in auth response")
            return None
        return token

    def get_availability(self, token: Any, route: Union[str, int, float], year: Union[int, str],
                         month: Union[int, str], location_id: int = 1) -> Any:
        """
        Query the available spaces for a route and month.

        :param token: Bearer token from get_auth_token
        :param route: Route identifier (idRuta)
        :param year: Year (anio)
        :param month: Month 1-12 (mes)
        :param location_id: Location identifier (idLugar)
        :return: The upstream JSON payload, untouched
        """
        params: Dict[str, Any] = {"idRuta": route, "anio": year, "mes": month, "idLugar": location_id}
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        try:
            response = self._request("GET", self.api_url, params=params, headers=headers)
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TuBoletoApiError(f"Request failed with status code {status}", status=status,
                                   details=_response_body(e.response)) from e
        except requests.RequestException as e:
            raise TuBoletoApiError(str(e)) from e
        except ValueError as e:
            raise TuBoletoApiError(f"Invalid availability response: {e}") from e
