"""Tests for swsite.wsgi and swsite.asgi modules."""

import os


def describe_wsgi_module():
    def it_exposes_callable_application():
        from swsite.wsgi import application

        assert callable(application)

    def it_sets_django_settings_module_env_var():
        import swsite.wsgi  # noqa: F401

        assert os.environ["DJANGO_SETTINGS_MODULE"] == "swsite.settings"


def describe_asgi_module():
    def it_exposes_callable_application():
        from swsite.asgi import application

        assert callable(application)
