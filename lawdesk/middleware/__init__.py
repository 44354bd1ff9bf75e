"""HTTP middleware: timeout, request size limit, request ID, security headers, request log.

Applied in main app; order matters (last added = outermost).
Import and use from lawdesk.main.
"""

from lawdesk.middleware.request_id import RequestIDMiddleware
from lawdesk.middleware.request_logging import RequestLoggingMiddleware
from lawdesk.middleware.request_size_limit import RequestSizeLimitMiddleware
from lawdesk.middleware.security_headers import SecurityHeadersMiddleware
from lawdesk.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
