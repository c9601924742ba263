# forum_access/services/associations.py
# =========================================================
# Association Store & Authorizer
# - user → 조회 가능한 forum ID set
# - 관리자는 연결 여부와 무관하게 모두 조회 가능
# - ID 비교는 정수 그대로 (문자열 "5"와 5는 다른 값)
# =========================================================

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set, Tuple

from ..backends import ForumCatalog, MetaStore
from ..constants import DEFAULT_META_KEY

logger = logging.getLogger(__name__)


def is_forum_id(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v > 0


class ForumAssociations:
    """
    ✅ 포럼 연결 저장/판단
    - meta_store      : read_meta / write_meta / iter_meta
    - is_administrator: user_id -> bool
    - catalog         : 게시된 포럼 목록 (프로필 화면용, 선택)
    """

    def __init__(
        self,
        meta_store: MetaStore,
        is_administrator: Callable[[Optional[int]], bool],
        catalog: Optional[ForumCatalog] = None,
        *,
        meta_key: str = DEFAULT_META_KEY,
    ):
        self.meta_store = meta_store
        self.is_administrator = is_administrator
        self.catalog = catalog
        self.meta_key = meta_key

    # ---------------------------------------------------------
    # ✅ 조회
    # ---------------------------------------------------------
    def get_associations(self, user_id: Optional[int]) -> Set[int]:
        if not user_id:
            return set()

        stored = self.meta_store.read_meta(user_id, self.meta_key)
        if stored is None:
            return set()
        if not isinstance(stored, (list, tuple, set, frozenset)):
            logger.warning("ignoring malformed %s for user %s: %r", self.meta_key, user_id, stored)
            return set()
        return {v for v in stored if is_forum_id(v)}

    def list_forums(self, limit: Optional[int] = None) -> List[Tuple[int, str]]:
        if self.catalog is None:
            return []
        return self.catalog.list_published_forums(limit)

    # ---------------------------------------------------------
    # ✅ 저장 (전체 덮어쓰기, last write wins)
    # ---------------------------------------------------------
    def set_associations(self, user_id: Optional[int], forum_ids: Iterable[int]) -> Set[int]:
        if not user_id:
            logger.warning("set_associations called without a user id")
            return set()

        ids = set()
        for v in forum_ids or ():
            if is_forum_id(v):
                ids.add(v)
            else:
                logger.warning("dropping non-integer forum id %r for user %s", v, user_id)

        self.meta_store.write_meta(user_id, self.meta_key, sorted(ids))
        logger.info("user %s forum associations set to %s", user_id, sorted(ids))
        return ids

    def add_association(self, user_id: Optional[int], forum_id: int) -> bool:
        """이미 있으면 no-op. 변경되었으면 True"""
        if not user_id or not is_forum_id(forum_id):
            return False

        current = self.get_associations(user_id)
        if forum_id in current:
            return False

        current.add(forum_id)
        self.set_associations(user_id, current)
        return True

    def remove_association(self, user_id: Optional[int], forum_id: int) -> bool:
        """없으면 no-op. 변경되었으면 True"""
        if not user_id or not is_forum_id(forum_id):
            return False

        current = self.get_associations(user_id)
        if forum_id not in current:
            return False

        current.discard(forum_id)
        self.set_associations(user_id, current)
        return True

    def purge_forum(self, forum_id: int) -> int:
        """삭제된 포럼 ID를 모든 사용자 연결에서 제거. 갱신된 사용자 수 반환"""
        if not is_forum_id(forum_id):
            return 0

        user_ids = [
            user_id
            for user_id, value in self.meta_store.iter_meta(self.meta_key)
            if isinstance(value, (list, tuple)) and forum_id in value
        ]
        return sum(1 for user_id in user_ids if self.remove_association(user_id, forum_id))

    # ---------------------------------------------------------
    # ✅ 판단
    # ---------------------------------------------------------
    def can_view(self, user_id: Optional[int], forum_id: int) -> bool:
        if self.is_administrator(user_id):
            return True
        return is_forum_id(forum_id) and forum_id in self.get_associations(user_id)
