"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends

from ..services.ad_service import AdService

_ad_service = AdService()


def get_ad_service() -> AdService:
    """Shared stateless service instance."""
    return _ad_service


AdServiceDep = Annotated[AdService, Depends(get_ad_service)]
