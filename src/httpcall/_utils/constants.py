# Environment variables
ENV_DEFAULT_TIMEOUT = "HTTPCALL_DEFAULT_TIMEOUT"
ENV_DEBUG = "HTTPCALL_DEBUG"

# Defaults
DEFAULT_TIMEOUT_SECONDS = 20.0

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_HOST = "Host"

# Authorization schemes
AUTHORIZATION_TOKEN_PREFIX = "Token"
AUTHORIZATION_BASIC_PREFIX = "Basic"

# Logging
LOGGER_NAME = "httpcall"
