from fastapi import APIRouter, Depends

from promo_quoter import __version__
from promo_quoter.infrastructure.resolution.container import Container, get_container

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(container: Container = Depends(get_container)) -> dict[str, str]:
    return {
        "status": "ok",
        "service": container.settings.service_name,
        "version": __version__,
        "store_backend": container.settings.store_backend.value,
    }
