"""FastAPI application exposing block reward and sync duties endpoints."""

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from eth_validator_api.analysis.models import BlockRewardResponse
from eth_validator_api.analysis.service import RewardService
from eth_validator_api.data.duties.models import SyncDuties
from eth_validator_api.data.duties.service import SyncDutiesService
from eth_validator_api.data.relays.classifier import RelayClassifier
from eth_validator_api.helpers.beacon import BeaconClient
from eth_validator_api.helpers.config import APISettings, load_settings
from eth_validator_api.helpers.errors import ValidatorAPIError
from eth_validator_api.helpers.http import create_http_client
from eth_validator_api.helpers.logging import get_logger
from eth_validator_api.helpers.rpc import RPCClient


logger = get_logger(__name__)


def build_services(settings: APISettings) -> tuple[RewardService, SyncDutiesService]:
    """Wire clients and services from settings."""
    beacon = BeaconClient(settings.beacon_node_url, timeout=settings.request_timeout)
    rpc = RPCClient(settings.eth_rpc_url, timeout=settings.request_timeout)
    classifier = RelayClassifier(settings.known_relays)

    def client_factory():
        return create_http_client(timeout=settings.request_timeout)

    return (
        RewardService(beacon, rpc, classifier, client_factory=client_factory),
        SyncDutiesService(beacon, client_factory=client_factory),
    )


def get_reward_service(request: Request) -> RewardService:
    return request.app.state.reward_service


def get_sync_duties_service(request: Request) -> SyncDutiesService:
    return request.app.state.sync_duties_service


async def handle_api_error(request: Request, exc: ValidatorAPIError) -> JSONResponse:
    """Serialize API errors as ``{"error": message}`` with their status."""
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(settings: APISettings | None = None) -> FastAPI:
    """Create the API application.

    Args:
        settings: Resolved settings, loaded from the environment when None

    Returns:
        FastAPI application

    Raises:
        ValueError: If settings cannot be resolved from the environment
    """
    settings = settings or load_settings()

    app = FastAPI(title="eth-validator-api", version="0.1.0")
    app.state.settings = settings
    app.state.reward_service, app.state.sync_duties_service = build_services(
        settings
    )
    app.add_exception_handler(ValidatorAPIError, handle_api_error)

    @app.get("/blockreward/{slot}", response_model=BlockRewardResponse)
    async def block_reward(
        slot: str, service: RewardService = Depends(get_reward_service)
    ) -> BlockRewardResponse:
        result = await service.compute(slot)
        return result.to_response()

    @app.get("/syncduties/{slot}", response_model=SyncDuties)
    async def sync_duties(
        slot: str, service: SyncDutiesService = Depends(get_sync_duties_service)
    ) -> SyncDuties:
        return await service.get_duties(slot)

    return app


__all__ = ["build_services", "create_app"]
