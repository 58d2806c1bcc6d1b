"""
Default configuration for curl-workbench.

Values are read from environment variables at import time and fall back to
the defaults below. Library users can override executor behaviour per
instance through ExecutorConfig instead of touching this module.
"""

import os

# Request Executor
# The builder always spoofs this Origin on outgoing requests. It is a
# demonstration setting, not a security feature; set it empty to disable.
_DEFAULT_ORIGIN = "https://www.smythstoys.com"
DEFAULT_ORIGIN = os.environ.get("WORKBENCH_ORIGIN", _DEFAULT_ORIGIN) or None

# Empty means no timeout: whatever the transport does is what you get
DEFAULT_TIMEOUT = os.environ.get("WORKBENCH_TIMEOUT", "")

# Proxy Configuration
PROXY_URL = os.environ.get("WORKBENCH_PROXY_URL", "")


def get_proxy_url():
    """Get proxy URL. Returns single URL string for httpx, or None."""
    if PROXY_URL:
        return PROXY_URL
    return None


# Generic API client
API_BASE_URL = os.environ.get("WORKBENCH_API_URL", "http://localhost")
API_TOKEN = os.environ.get("WORKBENCH_API_TOKEN") or None

# API Server
API_HOST = os.environ.get("WORKBENCH_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("WORKBENCH_PORT", "8000"))

# Opaque (no-cors) placeholder response
OPAQUE_STATUS = "Success"
OPAQUE_STATUS_TEXT = "Request completed in no-cors mode"
OPAQUE_BODY = "Response content not available in no-cors mode"
