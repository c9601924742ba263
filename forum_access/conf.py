# forum_access/conf.py

from __future__ import annotations

from typing import Optional

from django.conf import settings

from . import constants


class AppSettings:
    """
    ✅ FORUM_ACCESS_* settings 조회
    - 테스트에서 override_settings가 바로 반영되도록 매번 settings에서 읽음
    """

    prefix = "FORUM_ACCESS_"

    def _get(self, name: str, default):
        return getattr(settings, self.prefix + name, default)

    @property
    def META_KEY(self) -> str:
        return self._get("META_KEY", constants.DEFAULT_META_KEY)

    @property
    def FORUM_MODEL(self) -> str:
        return self._get("FORUM_MODEL", constants.DEFAULT_FORUM_MODEL)

    @property
    def PUBLISHED_FILTER(self) -> dict:
        return dict(self._get("PUBLISHED_FILTER", constants.DEFAULT_PUBLISHED_FILTER) or {})

    @property
    def FORUM_TITLE_FIELD(self) -> str:
        return self._get("FORUM_TITLE_FIELD", constants.DEFAULT_FORUM_TITLE_FIELD)

    @property
    def FORUM_LIST_LIMIT(self) -> Optional[int]:
        """None이면 제한 없음"""
        limit = self._get("FORUM_LIST_LIMIT", constants.DEFAULT_FORUM_LIST_LIMIT)
        return None if limit is None else int(limit)

    @property
    def ADMIN_PERMISSION(self) -> str:
        return self._get("ADMIN_PERMISSION", constants.DEFAULT_ADMIN_PERMISSION)

    @property
    def DENIED_MESSAGE(self) -> str:
        return self._get("DENIED_MESSAGE", constants.DEFAULT_DENIED_MESSAGE) or ""


app_settings = AppSettings()
