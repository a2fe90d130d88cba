"""Configuration API endpoints for runtime Flowise configuration management."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict, Optional
from .auth import verify_admin_api_key
from .config.config_manager import FlowiseConfigManager, get_config_manager
from .config.config_models import FlowiseConfig, FlowiseConfigUpdate, ValidationResult
from .config.exceptions import UnknownEndpointError
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/flowise", tags=["flowise configuration"])

MASK = "***"


def _masked(config: FlowiseConfig) -> Dict:
    """Config as a dict with the API key hidden."""
    data = config.model_dump()
    data["api_key"] = MASK if config.api_key else ""
    return data


# Endpoints
@router.get("")
async def get_flowise_config(
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Get complete Flowise configuration."""
    return _masked(manager.get_config())


@router.patch("")
async def update_flowise_config(
    updates: FlowiseConfigUpdate,
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Overlay the given fields on the Flowise configuration."""
    logger.info(f"[CONFIG API] Updating fields: {sorted(updates.model_fields_set)}")
    manager.update_config(updates)
    return {"status": "ok", "flowise_config": _masked(manager.get_config())}


@router.get("/endpoints")
async def get_flowise_endpoints(
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Get the Flowise endpoint table."""
    return manager.get_endpoints().as_dict()


@router.get("/url/{endpoint}")
async def build_flowise_url(
    endpoint: str,
    path: Optional[str] = None,
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Build the full URL for an endpoint, optionally with a sub-path."""
    try:
        return {"endpoint": endpoint, "url": manager.build_url(endpoint, path)}
    except UnknownEndpointError as e:
        logger.warning(f"[CONFIG API] ⚠ {e.message}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())


@router.get("/headers")
async def get_flowise_headers(
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Get the default request headers, bearer token masked."""
    headers = manager.get_headers()
    if "Authorization" in headers:
        headers["Authorization"] = f"Bearer {MASK}"
    return headers


@router.get("/validate", response_model=ValidationResult)
async def validate_flowise_config(
    manager: FlowiseConfigManager = Depends(get_config_manager),
    _: str = Depends(verify_admin_api_key),
):
    """Validate the current Flowise configuration."""
    return manager.validate()
