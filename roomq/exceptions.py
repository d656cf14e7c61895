"""Exceptions raised by :mod:`roomq`."""


class InvalidToken(ValueError):
    """An admission token is malformed, forged, or has unusable claims."""


class ConfigurationError(RuntimeError):
    """The guard was configured without a required parameter."""
