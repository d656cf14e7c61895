"""Functions for working with signed admission tokens."""

import jwt
from pydantic import ValidationError

from .domain import AdmissionToken
from .exceptions import InvalidToken

ALGORITHM = 'HS256'
ACCEPTED_ALGORITHMS = ['HS256', 'HS384', 'HS512']

# Only the signature and ``nbf`` are checked. Audience, issuer and issued-at
# claims are the ticket issuer's business.
_DECODE_OPTIONS = {
    'verify_exp': False,
    'verify_iat': False,
    'verify_aud': False,
    'verify_iss': False,
    'verify_sub': False,
    'verify_jti': False,
}


def encode(token: AdmissionToken, secret: str) -> str:
    """Sign an :class:`.AdmissionToken` as a compact JWT."""
    return jwt.encode(token.to_claims(), secret, algorithm=ALGORITHM)


def decode(raw: str, secret: str) -> AdmissionToken:
    """
    Verify and decode an admission token.

    The JWT ``exp`` claim is not verified; expiry is decided by
    :meth:`.AdmissionToken.expired` using the ``deadline`` claim.

    Raises
    ------
    :class:`.InvalidToken`
        Raised if the signature does not verify, or if the claims are not
        shaped like an admission token.

    """
    try:
        data = dict(jwt.decode(raw, secret, algorithms=ACCEPTED_ALGORITHMS,
                               options=_DECODE_OPTIONS))
    except jwt.exceptions.InvalidTokenError as e:
        raise InvalidToken(f'Not a valid token: {e}') from e
    try:
        return AdmissionToken.model_validate(data)
    except ValidationError as e:
        raise InvalidToken('Token claims are malformed') from e
