"""
Client for the external text-recognition service.

Two endpoints are supported:

- ``GET /extract/text?pdfPath=<path>`` for a file the service can read
  from disk (the saved cropped PDF)
- ``POST /api/extracttext`` with ``{"image": <base64 PNG>}``

Both answer with the recognized text as a plain-text body, which is
returned verbatim. Calls are made once; there are no retries.
"""

import base64
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from pdfsnip.core.errors import TextServiceError

logger = logging.getLogger(__name__)

PATH_ENDPOINT = "/extract/text"
IMAGE_ENDPOINT = "/api/extracttext"


class TextServiceClient:
    """Thin synchronous wrapper over an ``httpx.Client``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def extract_from_path(self, pdf_path: str) -> str:
        """
        Ask the service to read a saved file.

        Raises:
            TextServiceError: On network error or non-2xx status
        """
        encoded = quote(str(pdf_path), safe="")
        url = f"{self.base_url}{PATH_ENDPOINT}?pdfPath={encoded}"
        return self._request("GET", url)

    def extract_from_image(self, image_data: bytes) -> str:
        """
        Send an encoded raster for recognition.

        Raises:
            TextServiceError: On network error or non-2xx status
        """
        payload = {"image": base64.b64encode(image_data).decode("ascii")}
        return self._request("POST", f"{self.base_url}{IMAGE_ENDPOINT}", json=payload)

    def _request(self, method: str, url: str, **kwargs) -> str:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Text service returned %s for %s %s",
                e.response.status_code,
                method,
                url,
            )
            raise TextServiceError(
                f"Text service returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Text service request %s %s failed: %s", method, url, e)
            raise TextServiceError(f"Text service unreachable: {e}") from e

        logger.debug("Text service answered %d characters", len(response.text))
        return response.text

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
