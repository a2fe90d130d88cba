"""Centralized configuration for the Flowise API integration."""
from .config import (
    FLOWISE_ENDPOINTS,
    FlowiseConfig,
    FlowiseConfigManager,
    UnknownEndpointError,
    create_flowise_config,
    get_config_manager,
)

__version__ = "1.0.0"

__all__ = [
    "FLOWISE_ENDPOINTS",
    "FlowiseConfig",
    "FlowiseConfigManager",
    "UnknownEndpointError",
    "create_flowise_config",
    "get_config_manager",
]
