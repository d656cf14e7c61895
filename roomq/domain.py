"""Core data structures for admission control."""

from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict


class TokenType(str, Enum):
    """Admission states encoded by the ticket issuer."""

    SERVING = 'serving'
    QUEUE = 'queue'
    STOPPED = 'stopped'
    BOT = 'bot'
    SELF_SIGN = 'self-sign'


class AdmissionToken(BaseModel):
    """Claims carried by a verified admission token."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    room_id: Optional[Union[str, int]] = None
    """The room (client ID) that the token was issued for."""

    session_id: str
    """Binds the token to a single visitor session."""

    type: TokenType
    """Admission state of the visitor."""

    deadline: Optional[float] = None
    """
    Epoch seconds after which the token is considered expired.

    This is a business field, and is unrelated to the JWT ``exp`` claim.
    """

    iat: Optional[Union[int, float]] = None
    """Issued-at time (epoch seconds) of self-signed tokens."""

    def expired(self, now_ms: int) -> bool:
        """Whether :attr:`deadline` has passed, at ``now_ms`` milliseconds."""
        return bool(self.deadline) and self.deadline * 1000 < now_ms

    def to_claims(self) -> dict:
        """Claims suitable for encoding, omitting unset fields."""
        return self.model_dump(mode='json', exclude_none=True)


class Undecodable(NamedTuple):
    """A token was present on the request but could not be verified."""

    raw: str
    reason: str


class Decision(NamedTuple):
    """What the guard must do for the current request."""

    must_regenerate_token: bool
    must_redirect: bool


ENTER = Decision(must_regenerate_token=False, must_redirect=False)
REDIRECT = Decision(must_regenerate_token=False, must_redirect=True)
REGENERATE = Decision(must_regenerate_token=True, must_redirect=True)


class Admission(NamedTuple):
    """Outcome of the guard chain for one request."""

    token: str
    """The token that must be persisted to the client."""

    decision: Decision

    reason: str
    """Short description of the rule that matched."""

    @property
    def enter(self) -> bool:
        """The visitor may proceed to the protected resource."""
        return not self.decision.must_redirect


class ValidationResult(object):
    """
    The result of :meth:`roomq.guard.RoomQ.validate`.

    Carries the URL that the visitor must be redirected to, if any.
    """

    __slots__ = ('_redirect_url',)

    def __init__(self, redirect_url: Optional[str] = None) -> None:
        object.__setattr__(self, '_redirect_url', redirect_url)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError('ValidationResult is immutable')

    def __repr__(self) -> str:
        return f'ValidationResult({self._redirect_url!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self._redirect_url == other._redirect_url

    def __hash__(self) -> int:
        return hash(self._redirect_url)

    def need_redirect(self) -> bool:
        """Whether the caller must redirect the visitor."""
        return bool(self._redirect_url)

    def get_redirect_url(self) -> Optional[str]:
        """The redirect target, or ``None`` if the visitor may proceed."""
        return self._redirect_url
