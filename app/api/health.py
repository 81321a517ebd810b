from fastapi import APIRouter, Depends

from app.dependencies import get_repository
from app.repositories.product_repository import ProductRepository

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the product store is reachable."
)
def readiness_check(repository: ProductRepository = Depends(get_repository)):
    """
    Readiness check for the product store.

    Returns the store status and, when it is down, the error message.
    """
    checks = {"store": False}

    try:
        repository.ping()
        checks["store"] = True
    except Exception as e:
        checks["store_error"] = str(e)

    return {
        "status": "ready" if checks["store"] else "not_ready",
        "checks": checks
    }
