from nex.core.http.abc import HttpFetcher, HttpResponse
from nex.core.http.real import RealHttpFetcher

__all__ = [
    "HttpFetcher",
    "HttpResponse",
    "RealHttpFetcher",
]
