"""
The admission state machine.

Each request is classified by an ordered chain of rules. The first rule
whose predicate matches decides whether the visitor is redirected to the
ticket issuer, and whether a new self-signed token must be minted. If no
rule matches, the visitor may enter.

Note that ``stopped`` tokens are not intercepted by any rule, and so are
allowed to enter in the same way as ``serving`` and ``bot`` tokens.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional, Tuple, Union

from . import tokens
from .domain import AdmissionToken, Admission, Decision, TokenType, \
    Undecodable, ENTER, REDIRECT, REGENERATE
from .exceptions import InvalidToken

logger = logging.getLogger(__name__)

Classified = Union[None, Undecodable, AdmissionToken]
"""An absent, undecodable, or verified token."""

Predicate = Callable[[Classified, Optional[str], int], bool]


def _absent(token: Classified, session_id: Optional[str], now_ms: int) -> bool:
    return token is None


def _undecodable(token: Classified, session_id: Optional[str],
                 now_ms: int) -> bool:
    return isinstance(token, Undecodable)


def _session_mismatch(token: AdmissionToken, session_id: Optional[str],
                      now_ms: int) -> bool:
    return bool(session_id) and token.session_id != session_id


def _expired(token: AdmissionToken, session_id: Optional[str],
             now_ms: int) -> bool:
    return token.expired(now_ms)


def _in_queue(token: AdmissionToken, session_id: Optional[str],
              now_ms: int) -> bool:
    return token.type == TokenType.QUEUE


def _self_signed(token: AdmissionToken, session_id: Optional[str],
                 now_ms: int) -> bool:
    return token.type == TokenType.SELF_SIGN


RULES: Tuple[Tuple[str, Predicate, Decision], ...] = (
    ('no jwt', _absent, REGENERATE),
    ('invalid secret', _undecodable, REGENERATE),
    ('session id not match', _session_mismatch, REGENERATE),
    ('deadline exceed', _expired, REDIRECT),
    ('in queue', _in_queue, REDIRECT),
    ('self sign token', _self_signed, REDIRECT),
)
"""Rules in order of precedence; the first match wins."""


def classify(raw: Optional[str], secret: str) -> Classified:
    """Verify ``raw``, if present, without raising."""
    if not raw:
        return None
    try:
        return tokens.decode(raw, secret)
    except InvalidToken as e:
        return Undecodable(raw, str(e))


def to_millis(now: datetime) -> int:
    """Milliseconds since the epoch."""
    return int(now.timestamp() * 1000)


class AdmissionDecision(object):
    """Decides how to handle a request for a specific room."""

    def __init__(self, room_id: str, secret: str, debug: bool = False) -> None:
        self.room_id = room_id
        self._secret = secret
        self.debug = debug

    def _debug(self, message: str, *args: object) -> None:
        if self.debug:
            logger.debug('[RoomQ] ' + message, *args)

    def mint(self, session_id: Optional[str] = None,
             now: Optional[datetime] = None) -> str:
        """Generate a self-signed token for a visitor without a ticket."""
        issued_at = int(now.timestamp()) if now is not None else None
        token = AdmissionToken(
            room_id=self.room_id,
            session_id=session_id or str(uuid.uuid4()),
            type=TokenType.SELF_SIGN,
            iat=issued_at
        )
        return tokens.encode(token, self._secret)

    def evaluate(self, raw: Optional[str], session_id: Optional[str],
                 now: datetime) -> Admission:
        """
        Run the rule chain against the token on the current request.

        Parameters
        ----------
        raw : str or None
            The encoded token from the request, if any.
        session_id : str or None
            The application's session ID for the visitor, if the caller
            wants the token bound to it.
        now : :class:`datetime`
            The current (timezone-aware) time.

        Returns
        -------
        :class:`.Admission`

        """
        if raw:
            self._debug('current jwt %s', raw)
        token = classify(raw, self._secret)
        now_ms = to_millis(now)
        for reason, matches, decision in RULES:
            if matches(token, session_id, now_ms):
                break
        else:
            reason, decision = 'enter', ENTER
        self._debug(reason)

        if decision.must_regenerate_token:
            raw = self.mint(session_id, now)
            self._debug('generating new jwt %s', raw)
        return Admission(token=raw, decision=decision, reason=reason)
