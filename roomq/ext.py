"""
Flask integration for the waiting-room guard.

.. code-block:: python

   from flask import Flask
   from roomq.ext import WaitingRoom, exempt


   def create_web_app() -> Flask:
       app = Flask('shop')
       app.config.from_object('roomq.config')
       WaitingRoom(app)    # Every request is checked against the room.
       return app

Set ``ROOMQ_CLIENT_ID``, ``ROOMQ_JWT_SECRET`` and ``ROOMQ_TICKET_ISSUER`` on
the app config (see :mod:`roomq.config`).
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from flask import Flask, Request, Response, current_app, g, redirect, \
    request

from .config import Settings
from .guard import RoomQ
from .http import HttpContextProvider, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'roomq'
_PENDING_COOKIES = '_roomq_cookies'


class FlaskHttpRequest(HttpRequest):
    """Adapts a Flask :class:`Request`."""

    def __init__(self, req: Request) -> None:
        self._request = req

    def get_user_agent(self) -> str:
        return self._request.headers.get('User-Agent', '')

    def get_header(self, name: str) -> str:
        return self._request.headers.get(name, '')

    def get_absolute_uri(self) -> str:
        return self._request.url

    def get_user_host_address(self) -> str:
        return self._request.remote_addr or ''

    def get_cookie_value(self, cookie_key: str) -> Optional[str]:
        return self._request.cookies.get(cookie_key)

    def get_query_value(self, key: str) -> Optional[str]:
        return self._request.args.get(key)


class FlaskHttpResponse(HttpResponse):
    """
    Queues cookies for the response to the current request.

    Flask creates the response after the guard has run, so cookies are
    held on :data:`flask.g` until :func:`apply_cookies` is called.
    """

    def set_cookie(self, cookie_name: str, cookie_value: str, domain: str,
                   expiration: datetime) -> None:
        pending = g.setdefault(_PENDING_COOKIES, [])
        pending.append((cookie_name, cookie_value, domain, expiration))


class FlaskContextProvider(HttpContextProvider):
    """Provides the request and response of the current Flask context."""

    def __init__(self, req: Optional[Request] = None) -> None:
        self._request = FlaskHttpRequest(req if req is not None else request)
        self._response = FlaskHttpResponse()

    def get_http_request(self) -> HttpRequest:
        return self._request

    def get_http_response(self) -> HttpResponse:
        return self._response


def apply_cookies(response: Response) -> Response:
    """Set any cookies queued by :class:`.FlaskHttpResponse`."""
    for name, value, domain, expiration in g.pop(_PENDING_COOKIES, []):
        response.set_cookie(name, value, expires=expiration,
                            domain=domain or None)
    return response


def exempt(view: Callable) -> Callable:
    """Mark a view as not subject to the waiting room."""
    view._roomq_exempt = True   # type: ignore
    return view


def current_guard() -> RoomQ:
    """Get the :class:`.RoomQ` for the current application."""
    return current_app.extensions[EXTENSION_KEY]


class WaitingRoom(object):
    """Sends visitors to the ticket issuer until they are admitted."""

    def __init__(self, app: Optional[Flask] = None,
                 session_id_getter: Optional[Callable[[], Optional[str]]]
                 = None) -> None:
        """
        Initialize ``app`` with the guard.

        Parameters
        ----------
        app : :class:`Flask`
        session_id_getter : callable
            Returns the application's session ID for the current visitor,
            to bind admission tokens to that session.

        """
        self.session_id_getter = session_id_getter
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Attach the guard to ``app``.

        Raises
        ------
        :class:`.ConfigurationError`
            Raised if the app is missing guard configuration.

        """
        guard = RoomQ.from_settings(Settings.from_mapping(app.config))
        app.extensions[EXTENSION_KEY] = guard
        app.before_request(self.check_admission)
        app.after_request(apply_cookies)
        logger.debug('Waiting room enabled for client %s', guard.client_id)

    def _is_exempt(self) -> bool:
        if request.endpoint is None or request.endpoint == 'static':
            return True
        view = current_app.view_functions.get(request.endpoint)
        return getattr(view, '_roomq_exempt', False)

    def check_admission(self) -> Optional[Response]:
        """Redirect the visitor if they have not been admitted."""
        if self._is_exempt():
            return None
        session_id = None
        if self.session_id_getter is not None:
            session_id = self.session_id_getter()
        result = current_guard().validate(FlaskContextProvider(),
                                          session_id=session_id)
        if result.need_redirect():
            return redirect(result.get_redirect_url())
        return None
