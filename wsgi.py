"""Web Server Gateway Interface entry-point."""

import os

from roomq.factory import create_web_app

__flask_app__ = create_web_app(
    {key: value for key, value in os.environ.items()
     if key.startswith('ROOMQ_')}
)


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    return __flask_app__(environ, start_response)
