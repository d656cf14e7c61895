"""Helpers for the admission token query parameter."""

import re
from urllib.parse import quote, urlencode

TOKEN_PARAM = 'noq_t'
CLIENT_PARAM = 'noq_c'
RETURN_PARAM = 'noq_r'

_TOKEN = re.compile(r'([&]*)(noq_t=[^&]*)', re.IGNORECASE)
_ORPHAN_AMP = re.compile(r'\?&')
_TRAILING_QMARK = re.compile(r'\?\Z')

# Characters left alone by the issuer's query-string encoder.
_SAFE = "!'()*"


def remove_noq_token(url: str) -> str:
    """
    Strip the admission token parameter from ``url``.

    Only the first occurrence of ``noq_t`` is removed.
    """
    url = _TOKEN.sub('', url, count=1)
    url = _ORPHAN_AMP.sub('?', url, count=1)
    return _TRAILING_QMARK.sub('', url, count=1)


def ticket_issuer_url(ticket_issuer: str, token: str, client_id: str,
                      return_url: str) -> str:
    """Build the URL that sends the visitor to the ticket issuer."""
    query = urlencode([(TOKEN_PARAM, token),
                       (CLIENT_PARAM, client_id),
                       (RETURN_PARAM, return_url)],
                      quote_via=quote, safe=_SAFE)
    return f'{ticket_issuer}?{query}'
