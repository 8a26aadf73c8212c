"""Middleware to add Service-Worker-Allowed header for PWA support."""

from asgiref.sync import iscoroutinefunction, markcoroutinefunction
from django.http import HttpRequest, HttpResponseBase

SERVICE_WORKER_ALLOWED_HEADER = "Service-Worker-Allowed"
SERVICE_WORKER_ALLOWED_SCOPE = "/"


class ServiceWorkerAllowedMiddleware:
    """
    Add Service-Worker-Allowed header to every response.

    This allows a service worker served from any path (e.g. /static/js/sw.js)
    to control the entire application (scope '/') rather than just its own
    directory. The request is never inspected and the chain is never
    short-circuited: the next handler runs once and its response is returned
    with the header set, overwriting any value a view may have chosen.
    """

    sync_capable = True
    async_capable = True

    def __init__(self, get_response):
        self.get_response = get_response
        self.async_mode = iscoroutinefunction(self.get_response)
        if self.async_mode:
            markcoroutinefunction(self)

    def __call__(self, request: HttpRequest) -> HttpResponseBase:
        if self.async_mode:
            return self.__acall__(request)
        response = self.get_response(request)
        return self.allow_root_scope(response)

    async def __acall__(self, request: HttpRequest) -> HttpResponseBase:
        response = await self.get_response(request)
        return self.allow_root_scope(response)

    @staticmethod
    def allow_root_scope(response: HttpResponseBase) -> HttpResponseBase:
        response[SERVICE_WORKER_ALLOWED_HEADER] = SERVICE_WORKER_ALLOWED_SCOPE
        return response
