"""
Root URL configuration.

- /admin/: Django admin (Jazzmin)
- /api/elearning/: exam engine, question bank read access and JWT endpoints
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/elearning/", include("elearning.urls")),
]
