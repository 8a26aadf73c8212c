from django.urls import include, path

urlpatterns = [
    path("", include("sw_download.urls")),
]
