import logging

from dependency_injector.wiring import inject, Provide

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from vite_assets.dependency_injection.config import RouterConfig
from vite_assets.services.vite_manifest_service import ViteManifestService

misc_router = APIRouter()

logger = logging.getLogger(__name__)


@misc_router.get(RouterConfig.health_endpoint)
@inject
async def health(
    vite_manifest_service: ViteManifestService = Depends(
        Provide["services.vite_manifest_service"]
    ),
) -> JSONResponse:
    dev_server = vite_manifest_service.dev_server_enabled
    entries = len(vite_manifest_service)
    manifest_healthy = dev_server or entries > 0
    if not manifest_healthy:
        logger.error("The Vite manifest has no entries and the dev server is disabled")

    healthy = manifest_healthy
    response = {
        "healthy": healthy,
        "results": [
            {
                "healthy": manifest_healthy,
                "service": "vite_manifest",
                "entries": entries,
                "dev_server": dev_server,
            }
        ],
    }

    return JSONResponse(
        content=jsonable_encoder(response), status_code=200 if healthy else 500
    )
