"""HTTP middleware: request size limit and request ID.

Applied in create_app; order matters (last added = outermost).
"""

from filekeeper.middleware.request_id import RequestIDMiddleware
from filekeeper.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
]
