"""Handler failure boundary — turns unexpected exceptions into a safe 500.

Client errors (AttendanceError below 500) pass through untouched. Anything
else, typed server errors included, is logged with its traceback and
re-raised as OperationFailedError carrying the caller's client-facing message.
"""

import logging
from contextlib import contextmanager

from attendance_api.core.errors import (
    AttendanceError, ErrorContext, OperationFailedError,
)

logger = logging.getLogger(__name__)


@contextmanager
def failure_boundary(message: str, class_id: int | None = None):
    try:
        yield
    except AttendanceError as e:
        if e.http_status < 500:
            raise
        logger.error(
            f"{message}: {e.message}", exc_info=True,
            extra={"class_id": class_id, "error_code": e.code},
        )
        raise OperationFailedError(
            message, ErrorContext(class_id=class_id),
        ) from e
    except Exception as e:
        logger.error(
            f"{message}: {e}", exc_info=True, extra={"class_id": class_id},
        )
        raise OperationFailedError(
            message, ErrorContext(class_id=class_id),
        ) from e
