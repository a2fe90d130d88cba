"""Exceptions raised by the Flowise configuration manager"""
from typing import List, Optional


class UnknownEndpointError(LookupError):
    """Endpoint name is not part of the Flowise endpoint table"""
    def __init__(self, endpoint: str, known: Optional[List[str]] = None):
        self.endpoint = endpoint
        self.known = known or []
        self.message = f"Unknown Flowise endpoint: '{endpoint}'"
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert error to structured dict for API responses"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "endpoint": self.endpoint,
            "known_endpoints": self.known,
        }
