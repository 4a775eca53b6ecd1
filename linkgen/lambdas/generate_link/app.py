import json
import logging

from linkgen.types import LambdaEvent, LambdaContext, LambdaResponse
from linkgen.barcode import QRCodeRenderer
from linkgen.dao.redis import RedirectRedisDAO
from linkgen.dao.exceptions import DAOError
from linkgen.exceptions import ConfigError, EncodingError, InfrastructureError
from linkgen.service import LinkService
from linkgen.utils import LinkGenerator, load_config, generator_settings, app_prefix, guarantee_500_response
from linkgen.lambdas.generate_link.constants import (
    CONFIG_UNAVAILABLE,
    INVALID_JSON_BODY,
    MISSING_URL,
    LINK_GENERATED,
    LINK_GENERATION_FAILED,
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


def response_200(*, image: str, url: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps({'image': image, 'url': url}),
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to generate redirect links

    This Lambda handler follows this procedure to generate links:
    - Step 1: Load backend and generator configuration
    - Step 2: Extract the destination URL from the request body
    - Step 3: Generate a key, its redirect URL and a QR code (via LinkService)
    - Step 4: Respond with the QR code image and the redirect URL

    HTTP responses:
        200: Successful link generation
            image: SVG document of the QR code
            url: redirect URL (base path + key)
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing url)
        500: Internal server error (empty body)
            configuration, data store or QR code rendering failure

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'body': '{"url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['url']
        '/redirect/vq5ejng0p6'
    """
    # 1- Load backend and generator configuration
    try:
        app_config = load_config('generate_link')
        settings = generator_settings(app_config)
        encoder_config = settings.encoder_config()
    except (ConfigError, InfrastructureError):
        logger.exception('Failed to load configuration. Responding with 500.', extra={'event': CONFIG_UNAVAILABLE})
        return response_500()
    else:
        logger.debug('Assuming Redis as the backend database for redirects')
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}

    # 2- Extract destination URL from request body
    try:
        request_body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    target_url = request_body.get('url') if isinstance(request_body, dict) else None
    if not isinstance(target_url, str) or not target_url:
        logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': MISSING_URL})
        return response_400(message="missing 'url' in JSON body", error_code=MISSING_URL)

    # 3- Generate key, redirect URL and QR code
    try:
        dao = RedirectRedisDAO(**redis_config, prefix=app_prefix())
        generator = LinkGenerator.from_config(settings.base_path, encoder_config, renderer=QRCodeRenderer())
        image, link = LinkService(generator, dao).generate_with_barcode(target_url)
    except (EncodingError, DAOError):
        # NOTE: the counter reservation is committed even on this path
        logger.exception('Failed to generate link. Responding with 500.', extra={'event': LINK_GENERATION_FAILED})
        return response_500()

    # 4- Respond with QR code and redirect URL
    logger.info('Generated new redirect. Responding with 200.', extra={'key': link.key, 'event': LINK_GENERATED})
    return response_200(image=image.decode('utf-8'), url=link.url)
