"""Admission control for a room fronted by a ticket issuer."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from pytz import UTC

from .config import Settings
from .decision import AdmissionDecision
from .domain import ValidationResult
from .exceptions import ConfigurationError
from .http import HttpContextProvider
from .urls import TOKEN_PARAM, remove_noq_token, ticket_issuer_url

logger = logging.getLogger(__name__)

COOKIE_PREFIX = 'be_roomq_t_'
COOKIE_DURATION = timedelta(hours=12)


class RoomQ(object):
    """
    Decides whether a visitor may enter the room.

    Intended to be called once per request on any protected page, for
    example:

    .. code-block:: python

       guard = RoomQ('shop1', 's3cret', 'https://queue.example.com/ticket')
       result = guard.validate(provider)
       if result.need_redirect():
           return redirect(result.get_redirect_url())

    """

    def __init__(self, client_id: str, jwt_secret: str, ticket_issuer: str,
                 debug: bool = False) -> None:
        """
        Configure the guard for a room.

        Raises
        ------
        :class:`.ConfigurationError`
            Raised if ``client_id``, ``jwt_secret`` or ``ticket_issuer`` is
            empty.

        """
        for name, value in [('client_id', client_id),
                            ('jwt_secret', jwt_secret),
                            ('ticket_issuer', ticket_issuer)]:
            if not value:
                raise ConfigurationError(f'Missing parameter: {name}')
        self.settings = Settings(client_id, jwt_secret, ticket_issuer,
                                 bool(debug))
        self._decision = AdmissionDecision(client_id, jwt_secret,
                                           self.settings.debug)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'RoomQ':
        """Build a guard from :class:`.Settings`."""
        return cls(*settings)

    @property
    def client_id(self) -> str:
        return self.settings.client_id

    @property
    def ticket_issuer(self) -> str:
        return self.settings.ticket_issuer

    @property
    def debug(self) -> bool:
        return self.settings.debug

    @property
    def token_name(self) -> str:
        """Name of the cookie that holds the admission token."""
        return f'{COOKIE_PREFIX}{self.client_id}'

    def validate(self, provider: HttpContextProvider,
                 return_url: Optional[str] = None,
                 session_id: Optional[str] = None) -> ValidationResult:
        """
        Decide whether the current request may proceed.

        The admission token is always written back to the client, whatever
        the outcome.

        Parameters
        ----------
        provider : :class:`.HttpContextProvider`
        return_url : str
            Where the ticket issuer should send the visitor afterwards.
            Defaults to the current URL.
        session_id : str
            If given, tokens that are not bound to this session are
            replaced.

        Returns
        -------
        :class:`.ValidationResult`

        """
        request = provider.get_http_request()
        token = request.get_query_value(TOKEN_PARAM)
        if not token:
            token = request.get_cookie_value(self.token_name)
        current_url = request.get_absolute_uri()

        now = datetime.now(tz=UTC)
        admission = self._decision.evaluate(token, session_id, now)

        provider.get_http_response().set_cookie(
            self.token_name, admission.token, '', now + COOKIE_DURATION
        )

        if admission.decision.must_redirect:
            return self._redirect_to_ticket_issuer(admission.token,
                                                   return_url or current_url)
        return self._enter(current_url)

    def _enter(self, current_url: str) -> ValidationResult:
        url_without_token = remove_noq_token(current_url)
        if url_without_token != current_url:
            # Clear the token from the address bar.
            return ValidationResult(url_without_token)
        return ValidationResult(None)

    def _redirect_to_ticket_issuer(self, token: str,
                                   return_url: str) -> ValidationResult:
        return ValidationResult(ticket_issuer_url(
            self.ticket_issuer, token, self.client_id,
            remove_noq_token(return_url)
        ))
