import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from loguru import logger

from overload.sync.errors import MissingStatePayloadError
from overload.sync.migration import dump_state
from overload.sync.relay import SyncRelay

router = APIRouter(prefix="/sync", tags=["sync"])


def _get_relay(request: Request) -> SyncRelay:
    return request.app.state.relay


@router.get("/state")
def get_state(request: Request):
    """Return the relay's canonical snapshot, or null before the first push."""
    state = _get_relay(request).pull()
    logger.debug(f"Serving snapshot (present={state is not None})")
    return {"state": dump_state(state) if state is not None else None}


@router.post("/push")
async def push_state(request: Request):
    """Merge the pushed snapshot into the relay's and return the merged result.

    Responses:
        200: {"state": merged snapshot}
        400: Missing or unparseable state payload
        413: Body larger than the configured limit
        500: Merge failed
    """
    body = await request.body()
    max_payload_bytes = request.app.state.max_payload_bytes
    if len(body) > max_payload_bytes:
        logger.warning(f"Rejecting push of {len(body)} bytes (limit {max_payload_bytes})")
        return JSONResponse(status_code=413, content={"error": "Payload too large"})

    try:
        payload = json.loads(body or b"{}")
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON payload"})

    incoming = payload.get("state") if isinstance(payload, dict) else None

    try:
        # File IO and the merge run off the event loop
        merged = await run_in_threadpool(_get_relay(request).push, incoming)
    except MissingStatePayloadError as e:
        return JSONResponse(status_code=400, content={"error": e.reason})
    except Exception as e:
        logger.opt(exception=e).error("Sync merge failed: {}", e)
        return JSONResponse(status_code=500, content={"error": "Sync merge failed"})

    return {"state": dump_state(merged)}
