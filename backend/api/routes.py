"""FastAPI endpoints for the TextMaster API.

POST /api/huggingface - forward chat messages to the hosted model
GET /health - component health check
"""

import time

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from backend.api.schemas import ErrorResponse, QueryRequest, QueryResponse
from backend.core.inference import InferenceError

logger = structlog.get_logger(__name__)

router = APIRouter()

QUERY_PATH = "/api/huggingface"


@router.post(
    QUERY_PATH,
    response_model=QueryResponse,
    responses={500: {"model": ErrorResponse}},
)
def query(request: QueryRequest, req: Request):
    """Stream a completion from the hosted model and return it whole."""
    start = time.monotonic()
    logger.info("query.request", messages=len(request.messages))

    bridge = req.app.state.bridge
    if bridge is None:
        return _error("Inference bridge not available")

    messages = [m.model_dump() for m in request.messages]
    try:
        text = bridge.query(messages)
    except InferenceError as e:
        logger.error("query.upstream_failed", error=str(e))
        return _error(str(e))
    except Exception as e:
        logger.error("query.failed", error=str(e))
        return _error(str(e))

    latency_ms = int((time.monotonic() - start) * 1000)
    logger.info("query.response", chars=len(text), latency_ms=latency_ms)
    return QueryResponse(response=text)


@router.get("/health")
def health(req: Request):
    """Check health of the backend components."""
    bridge = req.app.state.bridge
    components = {"inference": "ok" if bridge is not None and bridge.is_healthy() else "error"}

    errors = [k for k, v in components.items() if v == "error"]
    status = "healthy" if not errors else "unhealthy"

    return {"status": status, "components": components}


@router.get("/")
@router.head("/")
def root_health():
    """Basic root health check for deployment platforms."""
    return {"status": "ok", "service": "textmaster-api"}


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())
