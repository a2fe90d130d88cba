"""Pydantic models for the Flowise connection configuration."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class FlowiseConfig(BaseModel):
    """Complete Flowise connection configuration."""
    api_key: str = Field("", description="Bearer token sent to Flowise")
    base_url: str = Field(..., description="Flowise host, e.g. https://api.flowiseai.com")
    timeout_ms: Optional[int] = Field(30000, description="Request timeout advertised to HTTP clients")
    retry_count: Optional[int] = Field(3, description="Retry attempts advertised to HTTP clients")
    logging_enabled: Optional[bool] = Field(True, description="Whether callers should log Flowise traffic")
    caching_enabled: Optional[bool] = Field(True, description="Whether callers should cache Flowise responses")

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class FlowiseConfigUpdate(BaseModel):
    """Partial configuration; only fields explicitly set are overlaid."""
    api_key: str = ""
    base_url: str = ""
    timeout_ms: Optional[int] = None
    retry_count: Optional[int] = None
    logging_enabled: Optional[bool] = None
    caching_enabled: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class FlowiseEndpoints(BaseModel):
    """REST paths of the Flowise API, keyed by logical endpoint name."""
    assistants: str = "/api/v1/assistants"
    attachments: str = "/api/v1/attachments"
    document_store: str = Field("/api/v1/documents", alias="documentStore")
    leads: str = "/api/v1/leads"
    ping: str = "/api/v1/ping"
    prediction: str = "/api/v1/prediction"
    tools: str = "/api/v1/tools"
    upsert_history: str = Field("/api/v1/upsert-history", alias="upsertHistory")
    variables: str = "/api/v1/variables"
    vector_upsert: str = Field("/api/v1/vector-upsert", alias="vectorUpsert")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def lookup(self, name: str) -> Optional[str]:
        """Resolve a logical endpoint name (camelCase where aliased) to a path."""
        for field_name, field in type(self).model_fields.items():
            if name == (field.alias or field_name):
                return getattr(self, field_name)
        return None

    def names(self) -> List[str]:
        """Logical endpoint names as used on the wire."""
        return list(self.model_dump(by_alias=True).keys())

    def as_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class ValidationResult(BaseModel):
    """Outcome of FlowiseConfigManager.validate()."""
    valid: bool
    errors: List[str] = Field(default_factory=list)
