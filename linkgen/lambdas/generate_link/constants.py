# Structured log event names emitted by the generate_link lambda
CONFIG_UNAVAILABLE = 'CONFIG_UNAVAILABLE'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_URL = 'MISSING_URL'
LINK_GENERATED = 'LINK_GENERATED'
LINK_GENERATION_FAILED = 'LINK_GENERATION_FAILED'
