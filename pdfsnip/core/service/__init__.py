"""External text-recognition service."""

from .service_worker import TextServiceWorker
from .text_service import IMAGE_ENDPOINT, PATH_ENDPOINT, TextServiceClient

__all__ = ["TextServiceClient", "TextServiceWorker", "PATH_ENDPOINT", "IMAGE_ENDPOINT"]
