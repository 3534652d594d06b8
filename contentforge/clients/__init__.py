# Remote content clients: CMS REST API and Pexels photo search
"""
Narrow interfaces to the two external services ContentForge talks to.
"""

from .cms import CMSClient
from .exceptions import ContentClientError, UnexpectedResponseError
from .pexels import MISSING_KEY_ERROR, PexelsClient

__all__ = [
    "CMSClient",
    "ContentClientError",
    "MISSING_KEY_ERROR",
    "PexelsClient",
    "UnexpectedResponseError",
]
