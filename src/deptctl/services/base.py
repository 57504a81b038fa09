"""BaseService: shared foundation for deptctl services."""

from __future__ import annotations

import logging

from deptctl.domain.directory import DirectoryError
from deptctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Subclasses translate domain exceptions into failed results with
    :meth:`_fail_from`, so callers only ever see ``ServiceResult``.
    """

    def _fail_from(self, op: str, exc: DirectoryError) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult.failure(op, exc.code, exc.message, dict(exc.detail))
