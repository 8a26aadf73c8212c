"""Views for the service worker host."""

from pathlib import Path

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET


def health_check(request):
    """Health check endpoint."""
    return JsonResponse({"status": "ok"})


@require_GET
def service_worker(request):
    """Serve the authenticated download service worker.

    The Service-Worker-Allowed header itself comes from
    ServiceWorkerAllowedMiddleware, which covers this response like any other.
    """
    sw_path = Path(settings.SERVICE_WORKER_SCRIPT)
    if not sw_path.exists():
        return HttpResponse("Service worker not found", status=404, content_type="text/plain")

    with open(sw_path) as f:
        content = f.read()

    return HttpResponse(content, content_type="application/javascript")
