import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import load_settings
from .controller.availability_controller import router as availability_router
from .controller.error_handlers import register_error_handlers
from .service.availability_service import AvailabilityService
from .utils.origin_gate import origin_gate
from .utils.tuboleto_client import TuBoletoClient

settings = load_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize the upstream client
tuboleto_client = TuBoletoClient(settings.auth_url, settings.api_url, settings.api_username,
                                 settings.api_password, verify_ssl=settings.verify_ssl,
                                 timeout=settings.timeout)
if not settings.verify_ssl:
    logger.warning("TLS certificate verification is disabled for the TuBoleto client")

# Initialize services
availability_service = AvailabilityService(tuboleto_client, settings.location_id)

# Initialize FastAPI app
app = FastAPI(title="TuBoleto Relay", description="Relay for Machu Picchu ticket availability",
              version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# Added last so it runs before CORS handling, preflight requests included
app.middleware("http")(origin_gate(settings.allowed_origins))
register_error_handlers(app)
app.include_router(availability_router)


def run():
    import uvicorn

    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
