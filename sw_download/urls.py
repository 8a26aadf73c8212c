"""Service worker app URL configuration."""

from django.urls import path

from . import views

urlpatterns = [
    # Health check
    path("health/", views.health_check, name="health_check"),
    # Service worker, served from the root so it can claim scope '/'
    path("sw.js", views.service_worker, name="service_worker"),
]
