# forums/views.py
# =========================================================
# Forum Views
# - 아카이브(목록): 연결된 포럼만 노출
# - 상세: 연결 안 된 포럼은 403 + 안내 문구
# =========================================================

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render

from forum_access.hooks import ForumAccessHooks

from .models import Forum

__all__ = ["forum_list", "forum_detail"]


def forum_list(request: HttpRequest) -> HttpResponse:
    """✅ 포럼 아카이브 — 현재 사용자가 볼 수 없는 포럼은 제외"""
    hooks = ForumAccessHooks.from_settings()
    forums = hooks.filter_forum_archive(request.user.pk, Forum.published.order_by("id"))
    return render(request, "forums/forum_list.html", {"forums": forums})


def forum_detail(request: HttpRequest, pk: int) -> HttpResponse:
    forum = get_object_or_404(Forum.published, pk=pk)

    hooks = ForumAccessHooks.from_settings()
    if not hooks.user_can_view_forum(True, forum.pk, request.user.pk):
        return render(request, "forums/forum_denied.html", {
            "forum": forum,
            "message": hooks.denied_message(),
        }, status=403)

    return render(request, "forums/forum_detail.html", {"forum": forum})
