# ===========================================
# 📂 forums/models.py — 토론 게시판 포럼
# ===========================================

from __future__ import annotations

from django.db import models

from .constants import FORUM_TITLE_MAX_LEN, STATUS_CHOICES, STATUS_DRAFT, STATUS_PUBLISH


class PublishedForumManager(models.Manager):
    def get_queryset(self):
        return super().get_queryset().filter(status=STATUS_PUBLISH)


class Forum(models.Model):
    """
    포럼
    - status=publish 인 포럼만 목록/연결 대상
    """

    title = models.CharField("제목", max_length=FORUM_TITLE_MAX_LEN)
    description = models.TextField("설명", blank=True, default="")
    status = models.CharField("상태", max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)
    created_at = models.DateTimeField("등록일", auto_now_add=True)

    objects = models.Manager()
    published = PublishedForumManager()

    def __str__(self) -> str:
        return self.title

    class Meta:
        ordering = ["id"]
        verbose_name = "forum"
        verbose_name_plural = "forums"
