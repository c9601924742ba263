# forum_access/policies.py
# =========================================================
# Forum Access Permission Policies (SSOT)
# - 연결 관리 화면(조회/저장) 접근 정책
# - 뷰/훅은 "정책 호출"만 하도록 분리
# =========================================================

from __future__ import annotations

from .backends import is_manager
from .conf import app_settings


def can_manage_associations(user) -> bool:
    """
    ✅ 포럼 연결 필드 조회/저장 가능 여부
    - 활성 superuser 또는 관리 권한 보유자
    - 본인 프로필이라도 일반 사용자는 볼 수 없음
    """
    return is_manager(user, app_settings.ADMIN_PERMISSION)
