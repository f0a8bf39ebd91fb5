# counter/middleware.py
from django.db import DatabaseError
from django.http import HttpResponseServerError

from .exceptions import CounterError
import logging

logger = logging.getLogger(__name__)


class ServerErrorMiddleware:
    """Render counter and database failures as a 500 carrying the error's description."""

    handled = (CounterError, DatabaseError)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, self.handled):
            return None
        logger.error(f"{request.method} {request.path} failed: {exception}")
        return HttpResponseServerError(
            f"Something went wrong: {exception}",
            content_type='text/plain; charset=utf-8',
        )
