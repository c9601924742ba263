# forum_access/decorators.py
from functools import wraps

from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from .policies import can_manage_associations


def association_manager_required(view_func):
    """로그인 + 포럼 연결 관리 권한. 권한 없으면 no_permission_popup (403)"""
    @login_required
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if can_manage_associations(request.user):
            return view_func(request, *args, **kwargs)
        return render(request, "no_permission_popup.html", status=403)
    return _wrapped_view
