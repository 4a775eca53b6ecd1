"""Helper utilities for AWS lambda functions.

Functions:
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn unhandled handler exceptions into HTTP 500 responses
    path_parameter(event: dict, name: str) -> str | None
        Extract a path parameter from an API Gateway event

Example:
    >>> @guarantee_500_response
    ... def lambda_handler(event, context):
    ...     raise RuntimeError('boom')
    >>> lambda_handler({}, None)['statusCode']
    500
"""

import os
import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from linkgen.exceptions import MissingEnvironmentVariableError
from linkgen.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with HTTP 500 when a lambda handler raises

    When running locally the original exception is re-raised so that
    `sam local invoke` shows the traceback.

    Args:
        handler (Callable):
            Lambda handler with the (event, context) signature.

    Returns:
        Callable: wrapped handler which never raises in the cloud.
    """

    @functools.wraps(handler)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return {
                'statusCode': 500,
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': 'UNKNOWN_INTERNAL_SERVER_ERROR',
                    }
                ),
            }

    return wrapper


def path_parameter(event: dict[str, Any], name: str) -> str | None:
    """Extract a path parameter from an API Gateway event

    Example:
        >>> path_parameter({'pathParameters': {'key': 'vq5ejng0p6'}}, 'key')
        'vq5ejng0p6'
        >>> path_parameter({'pathParameters': None}, 'key') is None
        True
    """
    return (event.get('pathParameters') or {}).get(name)
