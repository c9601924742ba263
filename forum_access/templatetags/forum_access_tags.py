# forum_access/templatetags/forum_access_tags.py
from django import template

from ..hooks import ForumAccessHooks

register = template.Library()


@register.simple_tag(takes_context=True)
def forum_association_fields(context, profile_user):
    """{% forum_association_fields profile_user %} — request.user가 관리자일 때만 출력"""
    request = context.get("request")
    viewer = getattr(request, "user", None)
    user_id = getattr(profile_user, "pk", profile_user)
    return ForumAccessHooks.from_settings().render_profile_fields(viewer, user_id)


@register.filter
def viewable_by(forum, user):
    """{% if forum|viewable_by:request.user %}"""
    forum_id = getattr(forum, "pk", forum)
    user_id = getattr(user, "pk", user)
    return ForumAccessHooks.from_settings().access.can_view(user_id, forum_id)
