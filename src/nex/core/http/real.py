"""Production HTTP fetcher backed by httpx."""

import logging

import httpx

from nex import __version__
from nex.core.errors import TransportError
from nex.core.http.abc import HttpFetcher, HttpResponse

logger = logging.getLogger(__name__)

USER_AGENT = f"nex/{__version__}"


class RealHttpFetcher(HttpFetcher):
    """Performs GET requests with a uniform User-Agent header.

    No timeout is configured; requests inherit OS-level defaults.
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        """Create fetcher.

        Args:
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._transport = transport

    def get(self, url: str) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            with httpx.Client(
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
                timeout=None,
                transport=self._transport,
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return HttpResponse(content=response.content, status_code=response.status_code)
