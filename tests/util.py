"""Helpers for exercising the guard without a web framework."""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from roomq.http import HttpContextProvider, HttpRequest, HttpResponse

CLIENT_ID = 'shop1'
SECRET = 's3cret'
TICKET_ISSUER = 'https://queue.example.com/ticket'


class FakeRequest(HttpRequest):
    def __init__(self, url: str, cookies: Optional[Dict[str, str]] = None,
                 query: Optional[Dict[str, str]] = None) -> None:
        self.url = url
        self.cookies = cookies or {}
        self.query = query or {}

    def get_user_agent(self) -> str:
        return 'test-agent'

    def get_header(self, name: str) -> str:
        return ''

    def get_absolute_uri(self) -> str:
        return self.url

    def get_user_host_address(self) -> str:
        return '127.0.0.1'

    def get_cookie_value(self, cookie_key: str) -> Optional[str]:
        return self.cookies.get(cookie_key)

    def get_query_value(self, key: str) -> Optional[str]:
        return self.query.get(key)


class FakeResponse(HttpResponse):
    def __init__(self) -> None:
        self.cookies: List[Tuple[str, str, str, datetime]] = []

    def set_cookie(self, cookie_name: str, cookie_value: str, domain: str,
                   expiration: datetime) -> None:
        self.cookies.append((cookie_name, cookie_value, domain, expiration))


class FakeProvider(HttpContextProvider):
    def __init__(self, url: str, cookies: Optional[Dict[str, str]] = None,
                 query: Optional[Dict[str, str]] = None) -> None:
        self.request = FakeRequest(url, cookies, query)
        self.response = FakeResponse()

    def get_http_request(self) -> HttpRequest:
        return self.request

    def get_http_response(self) -> HttpResponse:
        return self.response
