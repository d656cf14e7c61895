"""
Admission control for pages fronted by a virtual waiting room.

A ticket issuer hands out signed admission tokens to visitors as they
progress through its queue. :class:`.RoomQ` reads that token from the
``noq_t`` query parameter or the ``be_roomq_t_<client id>`` cookie on each
request, and decides whether the visitor may enter or must be sent (back)
to the ticket issuer.

Quick start
-----------
The guard is framework-agnostic; give it an
:class:`.http.HttpContextProvider` for the current request:

.. code-block:: python

   from roomq import RoomQ

   guard = RoomQ('shop1', 's3cret', 'https://queue.example.com/ticket')
   result = guard.validate(provider, session_id=my_session_id)
   if result.need_redirect():
       ...     # Redirect to result.get_redirect_url()

Flask applications can use :class:`roomq.ext.WaitingRoom` instead.
"""

from .domain import AdmissionToken, TokenType, ValidationResult
from .exceptions import ConfigurationError, InvalidToken
from .guard import RoomQ

__all__ = ['RoomQ', 'ValidationResult', 'AdmissionToken', 'TokenType',
           'ConfigurationError', 'InvalidToken']
