import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

AUTH_URL = "https://api-tuboleto.cultura.pe/auth/user/login"
API_URL = "https://api-tuboleto.cultura.pe/recaudador/venta/getConsultaCupos"

# Front-end domains allowed to call the relay from a browser
ALLOWED_ORIGINS = [
    "https://machupicchutickets.net",
    "https://enjoyperu.org",
    "https://machupicchu-andean.com",
    "https://bigfootmachupicchu.com",
    "https://sapadventures.org",
    "https://lostinperu.com",
    "https://www.cusco-explore.com",
    "https://www.machupicchuviews.com",
    "https://www.nickey-travel.com",
]


class Settings(BaseModel):
    api_username: Optional[str] = None
    api_password: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 4000
    auth_url: str = AUTH_URL
    api_url: str = API_URL
    location_id: int = 1
    verify_ssl: bool = False
    timeout: Optional[float] = None
    log_level: str = "INFO"
    allowed_origins: List[str] = ALLOWED_ORIGINS

    @field_validator("log_level", mode="before")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        # getLevelName returns an int only for names logging knows
        if isinstance(logging.getLevelName(level), int):
            return level
        return "INFO"


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """
    Build the settings from the environment, reading a local .env file first.

    Variables already present in the environment win over the .env file.
    """
    load_dotenv()

    timeout = os.environ.get("TUBOLETO_TIMEOUT")
    return Settings(
        api_username=os.environ.get("API_USERNAME"),
        api_password=os.environ.get("API_PASSWORD"),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 4000)),
        auth_url=os.environ.get("TUBOLETO_AUTH_URL", AUTH_URL),
        api_url=os.environ.get("TUBOLETO_API_URL", API_URL),
        location_id=int(os.environ.get("TUBOLETO_LOCATION_ID", 1)),
        verify_ssl=_env_bool("TUBOLETO_VERIFY_SSL", False),
        timeout=float(timeout) if timeout else None,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
