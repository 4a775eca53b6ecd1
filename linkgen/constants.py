# Encoder: default alphabet (lowercase letters + digits, URL-safe and case-insensitive)
DEFAULT_ALPHABET = 'abcdefghijklmnopqrstuvwxyz0123456789'
MIN_ALPHABET_LENGTH = 16

# Generator: defaults for the redirect base path and key length
DEFAULT_BASE_PATH = '/redirect'
DEFAULT_KEY_LENGTH = 10
DEFAULT_SALT = ''

# Counter domain: unsigned 64-bit integers, arithmetic wraps modulo 2^64
U64_MODULUS = 2**64
U64_MAX = U64_MODULUS - 1

# Barcode: default minimum image dimensions (pixel units)
DEFAULT_BARCODE_MIN_WIDTH = 200
DEFAULT_BARCODE_MIN_HEIGHT = 200

# Application environment
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'
AWS_SAM_LOCAL_ENV = 'AWS_SAM_LOCAL'

# Generator overrides (take precedence over AppConfig values)
LINK_BASE_PATH_ENV = 'LINK_BASE_PATH'
LINK_KEY_LENGTH_ENV = 'LINK_KEY_LENGTH'
LINK_SALT_ENV = 'LINK_SALT'

# AppConfig: identifiers of the configuration document
APPCONFIG_APP_ID_ENV = 'APPCONFIG_APP_ID'
APPCONFIG_ENV_ID_ENV = 'APPCONFIG_ENV_ID'
APPCONFIG_PROFILE_ID_ENV = 'APPCONFIG_PROFILE_ID'
