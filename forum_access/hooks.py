# forum_access/hooks.py
# =========================================================
# Host Hooks
# - 프로필 렌더 / 프로필 저장 / 조회 필터 / 목록(아카이브) 필터
# - 전역 등록 없이 ForumAssociations를 주입받아 사용
# =========================================================

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Set

from django.template.loader import render_to_string

from .conf import app_settings
from .constants import FIELD_NAME, FIELDS_TITLE, NO_FORUMS_MESSAGE
from .forms import ForumAssociationForm
from .policies import can_manage_associations
from .services import ForumAssociations, get_forum_access
from .services.associations import is_forum_id
from .utils.parsing import parse_submitted_forum_ids

logger = logging.getLogger(__name__)


def _forum_key(forum: Any) -> Any:
    return getattr(forum, "pk", forum)


class ForumAccessHooks:
    def __init__(self, access: ForumAssociations, *, list_limit: Optional[int] = None):
        self.access = access
        self.list_limit = list_limit

    @classmethod
    def from_settings(cls) -> "ForumAccessHooks":
        return cls(get_forum_access(), list_limit=app_settings.FORUM_LIST_LIMIT)

    # ---------------------------------------------------------
    # ✅ 프로필 화면
    # ---------------------------------------------------------
    def build_form(self, user_id: int) -> ForumAssociationForm:
        forums = self.access.list_forums(self.list_limit)
        current = self.access.get_associations(user_id)
        return ForumAssociationForm(
            forums=forums,
            initial={FIELD_NAME: sorted(current)},
        )

    def render_profile_fields(self, viewer, user_id: int) -> str:
        """관리자만 노출. 게시된 포럼이 없으면 안내 문구만"""
        if not can_manage_associations(viewer):
            return ""

        form = self.build_form(user_id)
        return render_to_string("forum_access/profile_fields.html", {
            "title": FIELDS_TITLE,
            "no_forums_message": NO_FORUMS_MESSAGE,
            "has_forums": form.has_forums(),
            "form": form,
        })

    def save_profile_fields(self, viewer, user_id: int, data: Any) -> Optional[Set[int]]:
        """
        ✅ 제출값으로 전체 덮어쓰기
        - 관리자 아니면 무시(None)
        - 체크 없음/손상 데이터 → 빈 set 저장
        """
        if not can_manage_associations(viewer):
            logger.warning("user %s may not save forum associations", getattr(viewer, "pk", None))
            return None

        forum_ids = parse_submitted_forum_ids(data)
        return self.access.set_associations(user_id, forum_ids)

    # ---------------------------------------------------------
    # ✅ 조회/목록 필터
    # ---------------------------------------------------------
    def user_can_view_forum(self, retval: bool, forum_id: int, user_id: Optional[int]) -> bool:
        if not self.access.can_view(user_id, forum_id):
            return False
        return retval

    def filter_forum_archive(self, user_id: Optional[int], forums: Iterable[Any]) -> List[Any]:
        """
        ✅ 연결되지 않은 포럼은 목록에서 제외
        - 관리자 여부/연결 목록은 1회만 조회 후 메모리에서 필터
        """
        forums = list(forums)
        if self.access.is_administrator(user_id):
            return forums
        allowed = self.access.get_associations(user_id)
        return [f for f in forums if is_forum_id(_forum_key(f)) and _forum_key(f) in allowed]

    def denied_message(self) -> str:
        return app_settings.DENIED_MESSAGE
