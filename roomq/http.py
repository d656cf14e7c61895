"""
Interfaces to the hosting framework's request and response.

The guard never touches a web framework directly. Each framework provides
an adapter that implements these interfaces; see :mod:`roomq.ext` for
Flask.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class HttpRequest(ABC):
    """Read access to the current request."""

    @abstractmethod
    def get_user_agent(self) -> str:
        """The ``User-Agent`` of the client."""

    @abstractmethod
    def get_header(self, name: str) -> str:
        """The value of header ``name``, or an empty string."""

    @abstractmethod
    def get_absolute_uri(self) -> str:
        """The full URL of the request, including the query string."""

    @abstractmethod
    def get_user_host_address(self) -> str:
        """The address of the client."""

    @abstractmethod
    def get_cookie_value(self, cookie_key: str) -> Optional[str]:
        """The value of cookie ``cookie_key``, if sent."""

    @abstractmethod
    def get_query_value(self, key: str) -> Optional[str]:
        """The value of query parameter ``key``, if present."""


class HttpResponse(ABC):
    """Write access to the response for the current request."""

    @abstractmethod
    def set_cookie(self, cookie_name: str, cookie_value: str, domain: str,
                   expiration: datetime) -> None:
        """Set a cookie on the response. An empty domain is host-only."""


class HttpContextProvider(ABC):
    """Pairs the request and response of one exchange."""

    @abstractmethod
    def get_http_request(self) -> HttpRequest:
        """Get the current request."""

    @abstractmethod
    def get_http_response(self) -> HttpResponse:
        """Get the current response."""
