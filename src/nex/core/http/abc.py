"""HTTP GET abstraction for registry access.

The fetcher performs a single GET and returns the body and status. It does
not retry, cache, or interpret the body.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Completed HTTP response."""

    content: bytes
    status_code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpFetcher(ABC):
    """Abstract HTTP fetcher for dependency injection."""

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """Issue a GET request.

        Args:
            url: Absolute URL to fetch

        Returns:
            HttpResponse with raw body bytes and status code

        Raises:
            TransportError: If the request could not complete
        """
        ...
