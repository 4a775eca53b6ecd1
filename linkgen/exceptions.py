"""Application-wide exceptions.

Every exception carries a stable `error_code` that handlers may surface in
logs without leaking internal state to HTTP clients.

Classes:
    LinkGenError:
        Base exception for all application-specific errors.

    ConfigError:
        Invalid encoder, generator or runtime configuration. Fatal; raised
        before any link is generated.

    MissingEnvironmentVariableError:
        A required environment variable is missing.

    BadConfigurationError:
        A configuration value is present but malformed.

    EncodingError:
        The barcode collaborator could not represent a generated URL.

    InvalidKeyError:
        A key is not the canonical encoding of a single counter value.

    InfrastructureError / AppConfigError:
        AWS infrastructure responded with unusable data.
"""


class LinkGenError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkgen_error'


class ConfigError(LinkGenError):
    """Base exception for all configuration errors."""

    error_code = 'config:config_error'


class MissingEnvironmentVariableError(ConfigError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class EncodingError(LinkGenError):
    """Raised when a generated URL cannot be rendered as a barcode."""

    error_code = 'encoding:encoding_error'


class InvalidKeyError(LinkGenError, ValueError):
    """Raised when a key cannot be decoded back to a counter value."""

    error_code = 'encoding:invalid_key_error'


class InfrastructureError(LinkGenError):
    """Base exception for all infrastructure (AWS) errors."""

    error_code = 'infra:infrastructure_error'


class AppConfigError(InfrastructureError):
    """Raised when AppConfig responds with erroneous data."""

    error_code = 'infra:appconfig_error'
