import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from deckcodes.api import codes_router, health_router
from deckcodes.config import settings
from deckcodes.models.failure import ApiResponse, DeckCodeError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("deckcodes"),
    debug=settings.debug,
)

app.include_router(codes_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DeckCodeError)
async def deck_code_error_handler(request: Request, exc: DeckCodeError) -> JSONResponse:
    """Answer every codec failure with a classified 400 envelope."""
    logger.info("Rejected %s: %s (%s)", request.url.path, exc.kind.value, exc.detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer anything outside the taxonomy with an unknown-failure envelope."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ApiResponse.unknown_failure(detail=type(exc).__name__).model_dump(mode="json"),
    )
