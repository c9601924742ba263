# forum_access/utils/http.py

from __future__ import annotations

from typing import Optional

from django.http import JsonResponse


def ok(data: Optional[dict] = None) -> JsonResponse:
    """AJAX 성공 응답: {"ok": true, ...data}"""
    return JsonResponse({"ok": True, **(data or {})})


def fail(message: str, status: int = 400, **extra) -> JsonResponse:
    """AJAX 실패 응답: {"ok": false, "message": ..., ...extra}"""
    return JsonResponse({"ok": False, "message": message, **extra}, status=status)
