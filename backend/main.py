"""FastAPI application entry point.

Startup sequence: load config from env -> build inference bridge.
"""

from contextlib import asynccontextmanager

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from backend.api.routes import router
from backend.core.config import InferenceConfig
from backend.core.inference import InferenceBridge

load_dotenv()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("startup.begin")

    config = InferenceConfig.from_env()
    bridge = InferenceBridge(config)
    app.state.bridge = bridge
    logger.info("startup.bridge_initialized", model=config.model, healthy=bridge.is_healthy())
    if not bridge.is_healthy():
        logger.warning("startup.no_api_key", hint="Set HF_API_KEY in .env")

    logger.info("startup.complete")
    yield
    app.state.bridge = None
    logger.info("shutdown.complete")


app = FastAPI(
    title="TextMaster API",
    description="Summarization and translation through a hosted LLM",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed bodies with an explicit invalid-request error."""
    errors = exc.errors()
    logger.warning("request.invalid", path=request.url.path, errors=len(errors))
    detail = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in errors]
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "detail": detail},
    )


app.include_router(router)
