"""Utility functions for application configuration management.

Lambda functions read their configuration from **AWS AppConfig**. Each
environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
shared AppConfig *Application*. The configuration JSON follows this structure:

    {
        "build": 7,
        "active_backend": "redis",
        "generator": {
            "base_path": "/redirect",
            "key_length": 10,
            "salt": "..."
        },
        "configs": {
            "generate_link": {
                "redis": { ... }
            },
            "redirect_link": {
                "redis": { ... }
            }
        }
    }

Each Lambda loads its own backend section plus the shared generator section.
Generator values may be overridden with the LINK_BASE_PATH, LINK_KEY_LENGTH
and LINK_SALT environment variables.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), `'local'` by default.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key prefix for DAOs, or None if `APP_NAME` is not set.

    load_config(lambda_name: str) -> dict
        Load the configuration of a Lambda from AWS AppConfig.

    generator_settings(app_config: dict) -> GeneratorSettings
        Resolve link generator settings from a loaded config and the environment.

Example:
    >>> from linkgen.utils.config import load_config, generator_settings
    >>> config = load_config('generate_link')
    >>> config['redis']['host']
    'redis-15501.host.docker.internal'
    >>> generator_settings(config).key_length
    10
"""

import os
import json
import logging
from dataclasses import dataclass

import boto3

from linkgen.constants import (
    APP_ENV_ENV,
    APP_NAME_ENV,
    APPCONFIG_APP_ID_ENV,
    APPCONFIG_ENV_ID_ENV,
    APPCONFIG_PROFILE_ID_ENV,
    DEFAULT_ALPHABET,
    DEFAULT_BASE_PATH,
    DEFAULT_KEY_LENGTH,
    DEFAULT_SALT,
    LINK_BASE_PATH_ENV,
    LINK_KEY_LENGTH_ENV,
    LINK_SALT_ENV,
)
from linkgen.exceptions import AppConfigError, BadConfigurationError, ConfigError
from linkgen.models import EncoderConfig
from linkgen.types import AppConfig
from linkgen.utils.helpers import require_environment


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorSettings:
    """Link generator settings

    Attributes:
        base_path (str):
            Base redirect path keys are appended to.
        key_length (int):
            Minimum key length.
        salt (str):
            Encoder salt.
        alphabet (str):
            Encoder alphabet.
    """

    base_path: str = DEFAULT_BASE_PATH
    key_length: int = DEFAULT_KEY_LENGTH
    salt: str = DEFAULT_SALT
    alphabet: str = DEFAULT_ALPHABET

    def encoder_config(self) -> EncoderConfig:
        """Build the EncoderConfig described by these settings

        Raises:
            BadConfigurationError:
                If the settings describe an invalid encoder.
        """
        try:
            return EncoderConfig(alphabet=self.alphabet, salt=self.salt, min_length=self.key_length)
        except ConfigError as e:
            raise BadConfigurationError(f'Invalid generator settings: {e}') from e


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(APP_NAME_ENV)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'linkgen'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'linkgen:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


@require_environment(APPCONFIG_APP_ID_ENV, APPCONFIG_ENV_ID_ENV, APPCONFIG_PROFILE_ID_ENV)
def load_config(lambda_name: str) -> AppConfig:
    """Load configuration for a given Lambda from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g., "generate_link" or "redirect_link").

    Returns:
        dict: {<active backend>: {...}, 'generator': {...}}

    Raises:
        MissingEnvironmentVariableError:
            If an AppConfig identifier is not set.
        AppConfigError:
            If the document lacks the backend section for this Lambda.
        botocore.exceptions.ClientError:
            If AppConfig calls fail.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[APPCONFIG_APP_ID_ENV],
        EnvironmentIdentifier=os.environ[APPCONFIG_ENV_ID_ENV],
        ConfigurationProfileIdentifier=os.environ[APPCONFIG_PROFILE_ID_ENV],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    try:
        config = json.loads(content.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise AppConfigError('AppConfig document is not valid JSON.') from e

    try:
        backend = config['active_backend']
        data = {backend: config['configs'][lambda_name][backend]}
    except (KeyError, TypeError) as e:
        raise AppConfigError(f"AppConfig document has no backend configuration for '{lambda_name}'.") from e
    data['generator'] = config.get('generator') or {}

    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': config.get('build')})
    return data


def generator_settings(app_config: AppConfig | None = None) -> GeneratorSettings:
    """Resolve link generator settings

    Precedence: environment variables > AppConfig 'generator' section > defaults.

    Args:
        app_config (dict | None):
            Configuration returned by `load_config()`.

    Returns:
        GeneratorSettings: resolved settings.

    Raises:
        BadConfigurationError:
            If the key length is not a positive integer or the salt/base path aren't strings.

    Example:
        >>> generator_settings({'generator': {'base_path': '/r', 'key_length': 8}})
        GeneratorSettings(base_path='/r', key_length=8, salt='', alphabet='abcdefghijklmnopqrstuvwxyz0123456789')
    """
    section = (app_config or {}).get('generator') or {}

    base_path = os.environ.get(LINK_BASE_PATH_ENV, section.get('base_path', DEFAULT_BASE_PATH))
    salt = os.environ.get(LINK_SALT_ENV, section.get('salt', DEFAULT_SALT))
    alphabet = section.get('alphabet', DEFAULT_ALPHABET)
    raw_length = os.environ.get(LINK_KEY_LENGTH_ENV, section.get('key_length', DEFAULT_KEY_LENGTH))

    try:
        key_length = int(raw_length)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f'Key length must be an integer (given value: {raw_length!r}).') from e
    if key_length < 1:
        raise BadConfigurationError(f'Key length must be a positive integer (given value: {key_length}).')
    if not isinstance(base_path, str) or not isinstance(salt, str) or not isinstance(alphabet, str):
        raise BadConfigurationError('Base path, salt and alphabet must be strings.')

    return GeneratorSettings(base_path=base_path, key_length=key_length, salt=salt, alphabet=alphabet)
