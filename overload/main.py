from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from overload.api.sync import router as sync_router
from overload.config.settings import settings
from overload.core.logger import setup_logger
from overload.sync.relay import SyncRelay
from overload.sync.store import JsonFileStateStore

# Initialize logger
setup_logger()


def create_app(data_file: str | None = None, max_payload_bytes: int | None = None) -> FastAPI:
    """Build the sync relay application.

    Args:
        data_file: Snapshot file (defaults to SYNC_DATA_FILE)
        max_payload_bytes: Push size limit (defaults to SYNC_MAX_PAYLOAD_BYTES)
    """
    app = FastAPI(title="Overload Sync Relay")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    store = JsonFileStateStore(data_file or settings.sync_data_file)
    app.state.relay = SyncRelay(store)
    app.state.max_payload_bytes = max_payload_bytes or settings.sync_max_payload_bytes

    app.include_router(sync_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
        return response

    logger.info(f"Sync relay initialized (state file: {store.path})")
    return app


app = create_app()
