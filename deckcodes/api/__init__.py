from deckcodes.api.codes import router as codes_router
from deckcodes.api.health import router as health_router

__all__ = [
    "codes_router",
    "health_router",
]
