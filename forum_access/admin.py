# forum_access/admin.py
# ============================================================
# 📂 관리자 페이지 설정 — UserMeta 조회 + 포럼 연결 Excel Export
# ============================================================

from __future__ import annotations

from django.contrib import admin
from django.http import HttpResponse
from openpyxl import Workbook

from .conf import app_settings
from .models import UserMeta

EXCEL_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_associations_as_excel(queryset, filename: str = "forum_associations.xlsx") -> HttpResponse:
    """포럼 연결(meta key 일치 row)만 엑셀로 내보내기"""
    wb = Workbook()
    ws = wb.active
    ws.title = "Associations"

    ws.append(["User ID", "User", "Forum IDs", "Updated"])

    for meta in queryset.filter(key=app_settings.META_KEY).select_related("user"):
        forum_ids = meta.value if isinstance(meta.value, list) else []
        ws.append([
            meta.user_id,
            str(meta.user),
            ", ".join(str(v) for v in forum_ids),
            meta.updated_at.strftime("%Y-%m-%d %H:%M") if meta.updated_at else "",
        ])

    response = HttpResponse(content_type=EXCEL_CONTENT_TYPE)
    response["Content-Disposition"] = f"attachment; filename={filename}"
    wb.save(response)
    return response


@admin.register(UserMeta)
class UserMetaAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "key", "get_value", "updated_at")
    list_filter = ("key",)
    search_fields = ("user__username", "key")
    ordering = ("user", "key")
    readonly_fields = ("updated_at",)
    raw_id_fields = ("user",)

    actions = ["export_selected_associations_to_excel"]

    @admin.display(description="Value")
    def get_value(self, obj):
        return obj.value

    @admin.action(description="Export forum associations (Excel)")
    def export_selected_associations_to_excel(self, request, queryset):
        return export_associations_as_excel(queryset, filename="selected_forum_associations.xlsx")
