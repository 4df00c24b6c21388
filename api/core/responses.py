"""
Shared response bodies.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class SuccessResponse(BaseModel):
    success: bool = True


def acknowledge(affected: int, *, resource: str, resource_id: int) -> SuccessResponse:
    # Zero-row matches still answer success.
    if affected == 0:
        logger.info("%s %s matched no rows.", resource, resource_id)
    return SuccessResponse(success=True)
