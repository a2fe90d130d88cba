from fastapi import Security, HTTPException, status, Request
from fastapi.security import APIKeyHeader
from .app_settings import settings

# Define API Key header for admin authentication
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_admin_api_key(
    request: Request,
    api_key: str = Security(api_key_header)
) -> str:
    """
    Verify the API key guarding the config admin API.
    Supports both X-API-Key header and Authorization Bearer token.

    Args:
        request: FastAPI request object
        api_key: API key from the X-API-Key header

    Returns:
        The validated API key

    Raises:
        HTTPException: If API key is invalid or no admin key is configured
    """
    expected = settings.admin_api_key
    if not expected:
        # No admin key configured -> nothing can authenticate
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Config API is disabled (ADMIN_API_KEY not set)"
        )

    # Try X-API-Key header first
    if api_key and api_key == expected:
        return api_key

    # Try Authorization Bearer token
    auth_header = request.headers.get("authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[7:]  # Remove "Bearer " prefix
        if token == expected:
            return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key"
    )
