# forum_access/services/__init__.py
# =========================================================
# Public Service API
# - 뷰/템플릿태그/시그널은 get_forum_access()로 조립된 인스턴스만 사용
# =========================================================

from __future__ import annotations

from ..backends import ModelAdministratorCheck, ModelForumCatalog, UserMetaStore
from ..conf import app_settings
from .associations import ForumAssociations

__all__ = ["ForumAssociations", "get_forum_access"]


def get_forum_access() -> ForumAssociations:
    """settings 기준 Django 백엔드로 ForumAssociations 조립 (요청 단위로 호출)"""
    return ForumAssociations(
        meta_store=UserMetaStore(),
        is_administrator=ModelAdministratorCheck(app_settings.ADMIN_PERMISSION),
        catalog=ModelForumCatalog(
            app_settings.FORUM_MODEL,
            published_filter=app_settings.PUBLISHED_FILTER,
            title_field=app_settings.FORUM_TITLE_FIELD,
        ),
        meta_key=app_settings.META_KEY,
    )
