# Structured log event names emitted by the redirect_link lambda
CONFIG_UNAVAILABLE = 'CONFIG_UNAVAILABLE'
MISSING_KEY = 'MISSING_KEY'
REDIRECT_NOT_FOUND = 'REDIRECT_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
