# forum_access/models.py

from __future__ import annotations

from django.conf import settings
from django.db import models

from .constants import MANAGE_PERMISSION_CODENAME


class UserMeta(models.Model):
    """
    ✅ 사용자 메타데이터 (key/value)
    - forum 연결 목록은 key="forum_associations", value=[forum_id, ...]
    - 사용자 삭제 시 같이 삭제 (CASCADE)
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="meta_entries",
    )
    key = models.CharField("키", max_length=100, db_index=True)
    value = models.JSONField("값", blank=True, null=True)

    updated_at = models.DateTimeField("수정일", auto_now=True)

    class Meta:
        verbose_name = "user meta"
        verbose_name_plural = "user meta"
        ordering = ["user_id", "key"]
        constraints = [
            models.UniqueConstraint(fields=["user", "key"], name="forum_access_usermeta_user_key"),
        ]
        permissions = [
            (MANAGE_PERMISSION_CODENAME, "Can manage forum associations"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id}:{self.key}"
