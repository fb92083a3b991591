"""Fake HTTP fetcher for testing.

FakeHttpFetcher serves pre-configured bodies by URL without touching the
network.
"""

from nex.core.errors import TransportError
from nex.core.http.abc import HttpFetcher, HttpResponse


class FakeHttpFetcher(HttpFetcher):
    """In-memory fake implementation of HttpFetcher.

    This class has NO public setup methods. All state is provided via
    constructor using keyword arguments.

    Unknown URLs answer 404 with an empty body.
    """

    def __init__(
        self,
        *,
        responses: dict[str, bytes | str | HttpResponse] | None = None,
        unreachable: set[str] | None = None,
    ) -> None:
        """Create FakeHttpFetcher with pre-configured responses.

        Args:
            responses: Mapping of URL -> body (served with 200) or full HttpResponse
            unreachable: URLs that raise TransportError
        """
        self._responses: dict[str, HttpResponse] = {}
        for url, body in (responses or {}).items():
            if isinstance(body, HttpResponse):
                self._responses[url] = body
            elif isinstance(body, str):
                self._responses[url] = HttpResponse(content=body.encode("utf-8"), status_code=200)
            else:
                self._responses[url] = HttpResponse(content=body, status_code=200)
        self._unreachable = unreachable or set()
        self._requested_urls: list[str] = []

    def get(self, url: str) -> HttpResponse:
        self._requested_urls.append(url)
        if url in self._unreachable:
            raise TransportError(url, "connection refused")
        return self._responses.get(url, HttpResponse(content=b"", status_code=404))

    @property
    def requested_urls(self) -> list[str]:
        """Get the URLs requested so far, in order.

        This property is for test assertions only.
        """
        return self._requested_urls.copy()
