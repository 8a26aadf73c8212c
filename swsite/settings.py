"""Django settings for swsite - service worker authenticated download host."""

import os
from pathlib import Path

import sentry_sdk

from sw_download.addon import server_middleware

BASE_DIR = Path(__file__).resolve().parent.parent

# Sentry
SENTRY_DSN = os.environ.get("SENTRY_DSN", "")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment="development" if os.environ.get("DJANGO_DEBUG", "True").lower() == "true" else "production",
        traces_sample_rate=0.1,
        send_default_pii=True,
    )

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-dev-key-change-in-production")
DEBUG = os.environ.get("DJANGO_DEBUG", "True").lower() == "true"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    # Project apps
    "sw_download",
]

MIDDLEWARE = server_middleware(
    [
        "django.middleware.security.SecurityMiddleware",
        "whitenoise.middleware.WhiteNoiseMiddleware",
        "django.middleware.common.CommonMiddleware",
        "django.middleware.clickjacking.XFrameOptionsMiddleware",
    ]
)

ROOT_URLCONF = "swsite.urls"

WSGI_APPLICATION = "swsite.wsgi.application"
ASGI_APPLICATION = "swsite.asgi.application"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
STATICFILES_DIRS = [BASE_DIR / "static"]
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}
# Serve straight from STATICFILES_DIRS so the worker is reachable without collectstatic.
WHITENOISE_USE_FINDERS = True

# Service worker script served at /sw.js
SERVICE_WORKER_SCRIPT = BASE_DIR / "static" / "js" / "sw.js"
