"""
URL configuration for forum_site project.
"""

# forum_site/urls.py

from django.contrib import admin
from django.shortcuts import redirect
from django.urls import include, path


def home_redirect(request):
    """홈(/) 접속 시 포럼 목록으로 리다이렉트"""
    return redirect("forums:forum_list")


urlpatterns = [
    path("admin/", admin.site.urls),
    path("", home_redirect, name="home"),
    path("forums/", include("forums.urls")),
    path("forum-access/", include("forum_access.urls")),
]
