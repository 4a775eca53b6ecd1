"""Unit tests for the generate_link AWS Lambda handler.

Verify the handler responds with proper HTTP status codes, validates
the request body, handles configuration errors, and stores generated
redirects through the DAO layer.

Test coverage includes:

1. Successful generation
   - Ensures valid requests return HTTP 200 with a QR code and the redirect URL.
   - Ensures sequential requests produce distinct keys.
   - Ensures generator settings from AppConfig are honored.

2. Invalid request body
   - Ensures invalid JSON and missing or non-string `url` return HTTP 400.

3. Configuration errors
   - Ensures missing configuration or invalid generator settings result in HTTP 500.

4. Generation errors
   - Ensures data store and QR code rendering failures result in HTTP 500.
   - Ensures unexpected exceptions result in HTTP 500 outside local runs.

Fixtures:
    - `apigw_event`: factory for API Gateway POST events.
    - `context`: mock AWS Lambda context object.
    - `config`: mock backend and generator configuration.
    - `dao`: in-memory DAO standing in for Redis.
    - `_patch_lambda_dependencies`: autouse fixture patching app dependencies.
"""

import json

import pytest

from linkgen.lambdas.generate_link import app
from linkgen.dao import RedirectMemoryDAO
from linkgen.dao.exceptions import DataStoreError
from linkgen.exceptions import EncodingError, MissingEnvironmentVariableError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture()
def apigw_event():
    def make(body):
        return {
            'resource': '/generate',
            'httpMethod': 'POST',
            'path': '/generate',
            'body': body if body is None or isinstance(body, str) else json.dumps(body),
            'requestContext': {'domainName': 'testhost:1000', 'stage': 'test'},
        }

    return make


@pytest.fixture()
def target_url():
    return 'https://example.com/blog/chuck-norris-is-awesome'


@pytest.fixture()
def context():
    class _Context:
        function_name = 'generate_link'

    return _Context()


@pytest.fixture()
def config():
    return {
        'redis': {
            'host': 'redis.test',
            'port': 6379,
            'db': 0,
        },
        'generator': {},
    }


@pytest.fixture()
def dao():
    return RedirectMemoryDAO()


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(monkeypatch, config, dao):
    """Automatically patch Lambda dependencies for all tests."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    for name in ('LINK_BASE_PATH', 'LINK_KEY_LENGTH', 'LINK_SALT'):
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
    monkeypatch.setattr(app, 'RedirectRedisDAO', lambda *a, **kw: dao)


# -------------------------------
# 1. Successful generation
# -------------------------------


def test_lambda_handler(apigw_event, context, dao, target_url):
    """Ensure Lambda generates a link with a QR code (HTTP 200)."""
    response = app.lambda_handler(apigw_event({'url': target_url}), context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert body['url'] == '/redirect/vq5ejng0p6'
    assert body['image'].startswith('<?xml')
    assert '<svg' in body['image']

    assert dao.get('vq5ejng0p6').target == target_url


def test_lambda_handler_sequential_requests(apigw_event, context, dao, target_url):
    urls = [json.loads(app.lambda_handler(apigw_event({'url': target_url}), context)['body'])['url'] for _ in range(3)]

    assert len(set(urls)) == 3
    assert dao.count() == 3


def test_lambda_handler_passes_redis_config(monkeypatch, apigw_event, context, dao, target_url):
    """Ensure the Redis section is forwarded as redis_* keyword arguments."""
    calls = []

    def fake_dao(*args, **kwargs):
        calls.append(kwargs)
        return dao

    monkeypatch.setattr(app, 'RedirectRedisDAO', fake_dao)
    monkeypatch.setenv('APP_NAME', 'linkgen')

    app.lambda_handler(apigw_event({'url': target_url}), context)

    assert calls == [{'redis_host': 'redis.test', 'redis_port': 6379, 'redis_db': 0, 'prefix': 'linkgen:test'}]


def test_lambda_handler_with_generator_settings(apigw_event, context, config, target_url):
    config['generator'] = {'base_path': 'https://sho.rt/r/', 'key_length': 10, 'salt': 'salt'}

    response = app.lambda_handler(apigw_event({'url': target_url}), context)

    assert json.loads(response['body'])['url'] == 'https://sho.rt/r/9x5eo4n7ow'


# -------------------------------
# 2. Invalid request body
# -------------------------------


@pytest.mark.parametrize(
    'body, error_code',
    [
        ('{not json', 'INVALID_JSON_BODY'),
        (None, 'MISSING_URL'),
        ({}, 'MISSING_URL'),
        ({'url': ''}, 'MISSING_URL'),
        ({'url': 42}, 'MISSING_URL'),
        (['https://example.com'], 'MISSING_URL'),
    ],
)
def test_lambda_handler_with_invalid_body(apigw_event, context, dao, body, error_code):
    """Ensure malformed bodies return HTTP 400 without consuming a key."""
    response = app.lambda_handler(apigw_event(body), context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 400
    assert body['errorCode'] == error_code
    assert body['message'].startswith('Bad Request (')
    assert dao.count() == 0


# -------------------------------
# 3. Configuration errors
# -------------------------------


def test_lambda_handler_with_missing_configuration(monkeypatch, apigw_event, context, target_url):
    def failing_load_config(*args, **kwargs):
        raise MissingEnvironmentVariableError("Missing required environment variables: 'APPCONFIG_APP_ID'")

    monkeypatch.setattr(app, 'load_config', failing_load_config)

    response = app.lambda_handler(apigw_event({'url': target_url}), context)

    assert response['statusCode'] == 500
    assert response['body'] == ''


def test_lambda_handler_with_invalid_generator_settings(apigw_event, context, config, target_url):
    config['generator'] = {'key_length': 0}

    response = app.lambda_handler(apigw_event({'url': target_url}), context)

    assert response['statusCode'] == 500


# -------------------------------
# 4. Generation errors
# -------------------------------


def test_lambda_handler_with_data_store_error(monkeypatch, apigw_event, context, target_url):
    def unreachable_dao(*args, **kwargs):
        raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    monkeypatch.setattr(app, 'RedirectRedisDAO', unreachable_dao)

    response = app.lambda_handler(apigw_event({'url': target_url}), context)

    assert response['statusCode'] == 500
    assert response['body'] == ''


def test_lambda_handler_with_rendering_error(monkeypatch, apigw_event, context, dao, target_url):
    """Ensure QR code rendering failures return HTTP 500 and store nothing."""

    def failing_render(self, text, min_width, min_height):
        raise EncodingError('Text exceeds QR code capacity.')

    monkeypatch.setattr(app.QRCodeRenderer, 'render', failing_render)

    response = app.lambda_handler(apigw_event({'url': target_url}), context)

    assert response['statusCode'] == 500
    assert len(dao) == 0
    assert dao.count() == 1


def test_lambda_handler_with_unexpected_error(monkeypatch, apigw_event, context, target_url):
    def broken_dao(*args, **kwargs):
        raise RuntimeError('boom')

    monkeypatch.setattr(app, 'RedirectRedisDAO', broken_dao)

    response = app.lambda_handler(apigw_event({'url': target_url}), context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'
