"""
Product Catalog Backend — Health Check Route
==============================================

What:  Health check endpoint for monitoring and container probes.
How:   Loads the data file through the repository; the service is only
       useful if that works.

Status levels:
    - healthy:   data file readable and well-formed
    - unhealthy: data file missing, unreadable or malformed
"""

import logging
import time

from fastapi import APIRouter, Depends

from product_catalog import __version__
from product_catalog.exceptions import StorageError
from product_catalog.schemas.product import HealthResponse
from product_catalog.storage import ProductRepository, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    repo: ProductRepository = Depends(get_repository),
) -> HealthResponse:
    data_status = "readable"
    overall = "healthy"
    product_count = None

    try:
        product_count = len(await repo.load())
    except StorageError as e:
        data_status = "unreadable"
        overall = "unhealthy"
        logger.warning("Health check: product data unavailable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        data_file=data_status,
        products=product_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
