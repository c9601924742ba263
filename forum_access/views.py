# forum_access/views.py
# =========================================================
# Forum Association Views (관리자 전용)
# - 사용자별 연결 화면(조회/저장)
# - AJAX 단건 연결/해제
# =========================================================

from __future__ import annotations

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from .constants import USER_ASSOCIATIONS
from .decorators import association_manager_required
from .hooks import ForumAccessHooks
from .utils import fail, ok, to_positive_int

User = get_user_model()

__all__ = [
    "user_associations",
    "ajax_associate",
    "ajax_disassociate",
]


@association_manager_required
@require_http_methods(["GET", "POST"])
def user_associations(request: HttpRequest, user_id: int) -> HttpResponse:
    """
    ✅ 사용자 프로필의 포럼 연결 영역
    - GET : 체크박스 목록 (현재 연결 체크)
    - POST: 제출값으로 전체 덮어쓰기 후 redirect
    """
    profile_user = get_object_or_404(User, pk=user_id)
    hooks = ForumAccessHooks.from_settings()

    if request.method == "POST":
        saved = hooks.save_profile_fields(request.user, profile_user.pk, request.POST)
        messages.success(request, f"Forum associations saved ({len(saved or ())}).")
        return redirect(USER_ASSOCIATIONS, user_id=profile_user.pk)

    return render(request, "forum_access/user_associations.html", {
        "profile_user": profile_user,
        "fields_markup": hooks.render_profile_fields(request.user, profile_user.pk),
    })


def _read_ids(request: HttpRequest):
    return to_positive_int(request.POST.get("user_id")), to_positive_int(request.POST.get("forum_id"))


def _toggle(request: HttpRequest, *, associate: bool) -> JsonResponse:
    user_id, forum_id = _read_ids(request)
    if not user_id or not forum_id:
        return fail("user_id and forum_id must be positive integers.", 400)

    if not User.objects.filter(pk=user_id).exists():
        return fail("User not found.", 404)

    access = ForumAccessHooks.from_settings().access
    if associate:
        changed = access.add_association(user_id, forum_id)
    else:
        changed = access.remove_association(user_id, forum_id)

    return ok({
        "changed": changed,
        "forum_ids": sorted(access.get_associations(user_id)),
    })


@association_manager_required
@require_POST
def ajax_associate(request: HttpRequest) -> JsonResponse:
    return _toggle(request, associate=True)


@association_manager_required
@require_POST
def ajax_disassociate(request: HttpRequest) -> JsonResponse:
    return _toggle(request, associate=False)
