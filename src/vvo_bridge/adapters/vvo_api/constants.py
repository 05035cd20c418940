"""Constants for the VVO API adapter.

The VVO web API is public and needs no authentication.
"""

VVO_BASE_URL = "https://webapi.vvo-online.de"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Maximum number of characters of an error body written to the log
ERROR_BODY_LOG_LIMIT = 500
