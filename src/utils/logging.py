"""
Shared logging configuration.

One Powertools logger serves every handler and service. Records are JSON on
a single line, tracebacks included, so each CloudWatch event holds a whole
log entry.
"""
import os
import sys
import json
import traceback
from typing import Optional

from aws_lambda_powertools import Logger


def format_exception(exc_info):
    """Flatten exception info into one line, frames separated by ' | '."""
    if exc_info is True:
        exc_info = sys.exc_info()

    if not (isinstance(exc_info, tuple) and len(exc_info) == 3) or exc_info[0] is None:
        return None
    try:
        lines = traceback.format_exception(*exc_info)
    except Exception as e:
        return f"Error formatting exception: {str(e)}"
    return ' | '.join(line.rstrip('\n').replace('\n', ' | ') for line in lines).strip()


class SingleLineLogger(Logger):
    """Powertools logger that writes exceptions as a single-line ``exception`` key."""

    def exception(self, message, *args, **kwargs):
        extra = kwargs.pop('extra', None) or {}
        extra['exception'] = format_exception(kwargs.pop('exc_info', True))
        super().exception(message, *args, exc_info=False, extra=extra, **kwargs)

    def bind_user(self, user_id: Optional[str]) -> None:
        """
        Attach the authenticated user to every following record.

        Warm Lambda containers reuse the logger, so the key is replaced (or
        removed when ``user_id`` is None) at the start of each request.
        """
        if user_id:
            self.append_keys(user_id=user_id)
        else:
            self.remove_keys(['user_id'])


logger = SingleLineLogger(
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'homestead-tracker'),
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=json.dumps,
    use_rfc3339=True
)

logger.append_keys(
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME'),
    version=os.environ.get('AWS_LAMBDA_FUNCTION_VERSION')
)


def log_exception(logger, message, exc_info=None, **kwargs):
    """
    Log an error with its traceback without raising the log level to EXCEPTION.

    Used where a failure is handled and the caller carries on, e.g. a
    dashboard that falls back to zeros.
    """
    extra = kwargs.pop('extra', None) or {}
    extra['exception'] = format_exception(exc_info or sys.exc_info())
    logger.error(message, extra=extra, **kwargs)
