"""Configuration for the waiting-room guard."""

import os
from typing import Any, Mapping, NamedTuple

from .exceptions import ConfigurationError

ROOMQ_CLIENT_ID = os.environ.get('ROOMQ_CLIENT_ID', '')
"""Identifies the protected room to the ticket issuer."""

ROOMQ_JWT_SECRET = os.environ.get('ROOMQ_JWT_SECRET', '')
"""Secret shared with the ticket issuer, used to sign admission tokens."""

ROOMQ_TICKET_ISSUER = os.environ.get('ROOMQ_TICKET_ISSUER', '')
"""Base URL of the ticket issuer."""

ROOMQ_DEBUG = os.environ.get('ROOMQ_DEBUG', '0')
"""Log the branch taken for each request."""

_TRUTHY = {'1', 'true', 'yes', 'on'}


def is_truthy(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


class Settings(NamedTuple):
    """Immutable guard configuration."""

    client_id: str
    jwt_secret: str
    ticket_issuer: str
    debug: bool = False

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> 'Settings':
        """
        Load settings from a Flask config or ``os.environ``-like mapping.

        Raises
        ------
        :class:`.ConfigurationError`
            Raised if a required parameter is missing or empty.

        """
        values = {}
        for field, key in [('client_id', 'ROOMQ_CLIENT_ID'),
                           ('jwt_secret', 'ROOMQ_JWT_SECRET'),
                           ('ticket_issuer', 'ROOMQ_TICKET_ISSUER')]:
            value = config.get(key)
            if not value:
                raise ConfigurationError(f'Missing parameter: {key}')
            values[field] = str(value)
        debug = is_truthy(config.get('ROOMQ_DEBUG', False))
        return cls(debug=debug, **values)
