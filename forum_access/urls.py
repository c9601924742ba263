# forum_access/urls.py
from django.urls import path

from . import views

app_name = "forum_access"

urlpatterns = [
    path("users/<int:user_id>/forums/", views.user_associations, name="user_associations"),
    path("ajax/associate/", views.ajax_associate, name="ajax_associate"),
    path("ajax/disassociate/", views.ajax_disassociate, name="ajax_disassociate"),
]
