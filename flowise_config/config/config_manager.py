"""Flowise configuration manager with environment defaults and partial overrides."""
import yaml
import threading
from pathlib import Path
from typing import Dict, Optional, Union
from ..app_settings import get_settings
from .config_models import FlowiseConfig, FlowiseConfigUpdate, FlowiseEndpoints, ValidationResult
from .exceptions import UnknownEndpointError
import logging

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.flowiseai.com"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_RETRY_COUNT = 3
USER_AGENT = "Zania-Platform/1.0.0"

# Endpoints of the Flowise REST API
FLOWISE_ENDPOINTS = FlowiseEndpoints()

ConfigInput = Union[FlowiseConfigUpdate, Dict, None]


def default_flowise_config() -> FlowiseConfig:
    """Default record for the current environment (FLOWISE_API_KEY / FLOWISE_BASE_URL)."""
    env = get_settings()
    return FlowiseConfig(
        api_key=env.flowise_api_key or "",
        base_url=env.flowise_base_url or DEFAULT_BASE_URL,
        timeout_ms=DEFAULT_TIMEOUT_MS,
        retry_count=DEFAULT_RETRY_COUNT,
        logging_enabled=True,
        caching_enabled=True,
    )


def _as_update(config: ConfigInput) -> FlowiseConfigUpdate:
    if config is None:
        return FlowiseConfigUpdate()
    if isinstance(config, FlowiseConfigUpdate):
        return config
    return FlowiseConfigUpdate(**config)


def _overlay(base: FlowiseConfig, config: ConfigInput) -> FlowiseConfig:
    """Field-by-field overlay: every field the caller set wins, the rest are kept."""
    updates = _as_update(config).model_dump(exclude_unset=True)
    return FlowiseConfig(**{**base.model_dump(), **updates})


def load_config_overrides(config_path: Union[str, Path]) -> FlowiseConfigUpdate:
    """
    Load FlowiseConfig overrides from a YAML file.

    Args:
        config_path: Path to a YAML mapping using FlowiseConfig field names.

    Returns:
        The partial configuration found in the file (empty file -> no overrides).
    """
    config_path = Path(config_path)
    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        if not isinstance(config_dict, dict):
            raise ValueError(f"Expected a mapping in {config_path}, got {type(config_dict).__name__}")

        overrides = FlowiseConfigUpdate(**config_dict)
        logger.info(f"[FLOWISE CONFIG] Loaded overrides for {sorted(config_dict)} from {config_path}")
        return overrides

    except Exception as e:
        logger.error(f"[FLOWISE CONFIG] Failed to load overrides from {config_path}: {e}")
        raise


class FlowiseConfigManager:
    """Holds the Flowise connection settings and derives URLs and headers from them."""

    def __init__(self, config: ConfigInput = None):
        """
        Initialize configuration manager.

        Args:
            config: Partial configuration overlaid on the environment defaults.
        """
        self._lock = threading.RLock()
        self._config = _overlay(default_flowise_config(), config)
        self._endpoints = FLOWISE_ENDPOINTS
        logger.info(
            f"[FLOWISE CONFIG] Initialized for {self._config.base_url} "
            f"(api key {'set' if self._config.api_key else 'missing'})"
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "FlowiseConfigManager":
        """Create a manager from a YAML overrides file."""
        return cls(load_config_overrides(config_path))

    def get_config(self) -> FlowiseConfig:
        """Get a snapshot of the current configuration."""
        with self._lock:
            return self._config.model_copy()

    def get_endpoints(self) -> FlowiseEndpoints:
        """Get the Flowise endpoint table."""
        return self._endpoints

    def build_url(self, endpoint: str, path: Optional[str] = None) -> str:
        """
        Build the full URL for an endpoint.

        Args:
            endpoint: Endpoint name, e.g. "prediction" or "vectorUpsert"
            path: Optional sub-path appended after the endpoint path, e.g. a chatflow id

        Raises:
            UnknownEndpointError: If the endpoint is not in the Flowise table
        """
        endpoint_path = self._endpoints.lookup(endpoint)
        if endpoint_path is None:
            raise UnknownEndpointError(endpoint, self._endpoints.names())

        full_path = f"{endpoint_path}/{path}" if path else endpoint_path
        return f"{self.get_base_url()}{full_path}"

    def get_headers(self) -> Dict[str, str]:
        """Get default headers for Flowise requests."""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

        api_key = self.get_api_key()
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        return headers

    def validate(self) -> ValidationResult:
        """Check the configuration; problems are reported, never raised."""
        config = self.get_config()
        errors = []

        if not config.api_key:
            errors.append("FLOWISE_API_KEY is required")

        if not config.base_url:
            errors.append("FLOWISE_BASE_URL is required")
        elif not config.base_url.startswith("http"):
            errors.append("FLOWISE_BASE_URL must start with http:// or https://")

        if errors:
            logger.warning(f"[FLOWISE CONFIG] ⚠ Invalid configuration: {'; '.join(errors)}")

        return ValidationResult(valid=not errors, errors=errors)

    def update_config(self, config: ConfigInput) -> None:
        """Overlay a partial configuration on the current one (no validation)."""
        update = _as_update(config)
        with self._lock:
            self._config = _overlay(self._config, update)
        logger.info(f"[FLOWISE CONFIG] Updated fields: {sorted(update.model_fields_set)}")

    # Convenience accessors

    def get_base_url(self) -> str:
        """Get the Flowise base URL."""
        with self._lock:
            return self._config.base_url

    def get_api_key(self) -> str:
        """Get the Flowise API key."""
        with self._lock:
            return self._config.api_key

    def get_timeout(self) -> int:
        """Get the request timeout in milliseconds (unset or 0 -> default)."""
        with self._lock:
            return self._config.timeout_ms or DEFAULT_TIMEOUT_MS

    def get_retries(self) -> int:
        """Get the retry count (unset or 0 -> default)."""
        with self._lock:
            return self._config.retry_count or DEFAULT_RETRY_COUNT

    def is_logging_enabled(self) -> bool:
        """Whether logging is enabled (only an unset value defaults to True)."""
        with self._lock:
            enabled = self._config.logging_enabled
        return True if enabled is None else enabled

    def is_caching_enabled(self) -> bool:
        """Whether caching is enabled (only an unset value defaults to True)."""
        with self._lock:
            enabled = self._config.caching_enabled
        return True if enabled is None else enabled


# Global singleton instance
_config_manager: Optional[FlowiseConfigManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager() -> FlowiseConfigManager:
    """Get or create the process-wide configuration manager."""
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None:
            config_file = get_settings().flowise_config_file
            if config_file:
                _config_manager = FlowiseConfigManager.from_file(config_file)
            else:
                _config_manager = FlowiseConfigManager()
        return _config_manager


def reset_config_manager() -> None:
    """Drop the process-wide manager (mainly for testing)."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None


def get_config() -> FlowiseConfig:
    """Get the current configuration of the process-wide manager (convenience function)."""
    return get_config_manager().get_config()


def create_flowise_config(config: ConfigInput = None) -> FlowiseConfigManager:
    """Create a fresh, independent configuration manager."""
    return FlowiseConfigManager(config)
