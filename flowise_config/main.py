from fastapi import FastAPI
from .app_settings import settings
import uvicorn
import logging

# Custom formatter for compact logs with newlines after tags
class CompactFormatter(logging.Formatter):
    def format(self, record):
        # Extract tag like [FLOWISE CONFIG] or [CONFIG API] from message
        msg = record.getMessage()
        if msg.startswith('[') and ']' in msg:
            tag_end = msg.index(']') + 1
            tag = msg[:tag_end]
            rest = msg[tag_end:].lstrip()
            record.msg = f"{tag}\n  {rest}"
            record.args = None
        return super().format(record)

# Configure logging
handler = logging.StreamHandler()
handler.setFormatter(CompactFormatter('%(asctime)s %(message)s', datefmt='%H:%M:%S'))
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO), handlers=[handler])

app = FastAPI(
    title="Flowise Config Service API",
    description="Runtime view of the Flowise connection configuration",
    version="1.0.0"
)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "service": "Flowise Config Service API",
        "version": "1.0.0",
        "status": "running"
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "flowise-config-service"
    }


# Import and include routers
from .config_routes import router as config_router

app.include_router(config_router)


def run():
    uvicorn.run(
        "flowise_config.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
