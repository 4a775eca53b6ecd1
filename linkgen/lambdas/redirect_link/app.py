import json
import logging

from linkgen.types import LambdaEvent, LambdaContext, LambdaResponse
from linkgen.dao.redis import RedirectRedisDAO
from linkgen.exceptions import ConfigError, InfrastructureError
from linkgen.service import LinkService
from linkgen.utils import LinkGenerator, load_config, generator_settings, app_prefix, guarantee_500_response, path_parameter
from linkgen.lambdas.redirect_link.constants import (
    CONFIG_UNAVAILABLE,
    MISSING_KEY,
    REDIRECT_NOT_FOUND,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


def response_500() -> LambdaResponse:
    return {
        'statusCode': 500,
        'body': '',
    }


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': 400,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_404() -> LambdaResponse:
    return {
        'statusCode': 404,
        'body': '',
    }


def response_307(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 307,
        'headers': {'location': location},
        'body': '',
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to follow redirect links

    This Lambda handler follows this procedure to redirect:
    - Step 1: Load backend and generator configuration
    - Step 2: Extract key from request path
    - Step 3: Look up the destination URL in the database
    - Step 4: Redirect client to the destination URL

    HTTP responses:
        307: Successful redirect
            headers:
                location: destination URL
        400: Bad client request
            message: missing key in path parameters
        404: Unknown key (never generated or no longer stored)
        500: Internal server error

    Args:
        event (dict):
            API Gateway event payload containing the key path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        dict:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'key': 'vq5ejng0p6'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        307
        >>> response['headers']['location']
        'https://example.com/my-page'
    """
    # 1- Load backend and generator configuration
    try:
        app_config = load_config('redirect_link')
        settings = generator_settings(app_config)
        encoder_config = settings.encoder_config()
    except (ConfigError, InfrastructureError):
        logger.exception('Failed to load configuration. Responding with 500.', extra={'event': CONFIG_UNAVAILABLE})
        return response_500()
    else:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 2- Extract key from request's path
    key = path_parameter(event, 'key')
    if key is None:
        logger.info('Missing "key" in path. Responding with 400.', extra={'event': MISSING_KEY})
        return response_400(message="missing 'key' in path", error_code=MISSING_KEY)

    # 3- Look up destination URL
    dao = RedirectRedisDAO(**redis_config, prefix=app_prefix())
    service = LinkService(LinkGenerator.from_config(settings.base_path, encoder_config), dao)
    target = service.lookup(key)
    if target is None:
        logger.info('Redirect key not found. Responding with 404.', extra={'key': key, 'event': REDIRECT_NOT_FOUND})
        return response_404()

    # 4- Redirect client to destination URL
    logger.info('Redirecting client. Responding with 307.', extra={'key': key, 'event': REDIRECT_SUCCESS})
    return response_307(location=target)
