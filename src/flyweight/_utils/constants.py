# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_PRAGMA = "Pragma"

JSON_CONTENT_TYPE = "application/json"

# Caching is never used: every call goes to the remote resource
NO_CACHE_HEADERS = {
    HEADER_CACHE_CONTROL: "no-cache",
    HEADER_PRAGMA: "no-cache",
}

# Environment variables
ENV_TIMEOUT = "FLYWEIGHT_TIMEOUT"
ENV_LOG_STYLE = "FLYWEIGHT_LOG_STYLE"
ENV_USER_AGENT = "FLYWEIGHT_USER_AGENT"
ENV_DISABLE_SSL = "FLYWEIGHT_DISABLE_SSL"

# CA locations, checked in order
ENV_CA_BUNDLE = ("FLYWEIGHT_CA_BUNDLE", "SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
ENV_CA_DIR = ("FLYWEIGHT_CA_DIR", "SSL_CERT_DIR")

DOTENV_FILE = ".env"

LOGGER_NAME = "flyweight"
