"""Health check endpoints."""

from fastapi import APIRouter

from doc_generator import __version__
from doc_generator.api.dependencies import Registry
from doc_generator.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(registry: Registry) -> HealthResponse:
    """
    Health check endpoint.

    Returns the service version and the dialects it can document.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        dialects=[dialect.value for dialect in registry.supported_dialects],
    )


@router.get("/live")
def liveness_check() -> dict:
    """
    Liveness probe for Kubernetes.

    Returns 200 if the service is alive.
    """
    return {"alive": True}
