"""Flowise connection configuration: settings, endpoint table and derived URLs/headers."""
from .config_manager import (
    FLOWISE_ENDPOINTS,
    FlowiseConfigManager,
    create_flowise_config,
    default_flowise_config,
    get_config,
    get_config_manager,
    load_config_overrides,
    reset_config_manager,
)
from .config_models import FlowiseConfig, FlowiseConfigUpdate, FlowiseEndpoints, ValidationResult
from .exceptions import UnknownEndpointError

__all__ = [
    "FLOWISE_ENDPOINTS",
    "FlowiseConfigManager",
    "create_flowise_config",
    "default_flowise_config",
    "get_config",
    "get_config_manager",
    "load_config_overrides",
    "reset_config_manager",
    "FlowiseConfig",
    "FlowiseConfigUpdate",
    "FlowiseEndpoints",
    "ValidationResult",
    "UnknownEndpointError",
]
