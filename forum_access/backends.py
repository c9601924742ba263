# forum_access/backends.py
# =========================================================
# Collaborators (호스트 위임 기능)
# - 메타데이터 저장소 / 포럼 카탈로그 / 관리자 판별
# - Django 구현 + 메모리 구현(테스트/단독 사용)
# =========================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from django.apps import apps
from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)

ForumEntry = Tuple[int, str]


# =========================================================
# ✅ Metadata store
# =========================================================
class MetaStore:
    def read_meta(self, user_id: int, key: str) -> Any:
        raise NotImplementedError

    def write_meta(self, user_id: int, key: str, value: Any) -> None:
        raise NotImplementedError

    def iter_meta(self, key: str) -> Iterator[Tuple[int, Any]]:
        raise NotImplementedError


class MemoryMetaStore(MetaStore):
    def __init__(self, initial: Optional[Mapping[Tuple[int, str], Any]] = None):
        self._entries: Dict[Tuple[int, str], Any] = dict(initial or {})

    def read_meta(self, user_id: int, key: str) -> Any:
        return self._entries.get((user_id, key))

    def write_meta(self, user_id: int, key: str, value: Any) -> None:
        self._entries[(user_id, key)] = value

    def iter_meta(self, key: str) -> Iterator[Tuple[int, Any]]:
        for (user_id, k), value in list(self._entries.items()):
            if k == key:
                yield user_id, value


class UserMetaStore(MetaStore):
    """UserMeta 모델 기반 저장소 (user+key 당 1 row)"""

    def _model(self):
        from .models import UserMeta

        return UserMeta

    def read_meta(self, user_id: int, key: str) -> Any:
        return (
            self._model().objects
            .filter(user_id=user_id, key=key)
            .values_list("value", flat=True)
            .first()
        )

    def write_meta(self, user_id: int, key: str, value: Any) -> None:
        self._model().objects.update_or_create(
            user_id=user_id,
            key=key,
            defaults={"value": value},
        )

    def iter_meta(self, key: str) -> Iterator[Tuple[int, Any]]:
        qs = self._model().objects.filter(key=key).values_list("user_id", "value")
        yield from qs.iterator()


# =========================================================
# ✅ Forum catalog
# =========================================================
class ForumCatalog:
    def list_published_forums(self, limit: Optional[int] = None) -> List[ForumEntry]:
        raise NotImplementedError


def _apply_limit(items: List[ForumEntry], limit: Optional[int]) -> List[ForumEntry]:
    if limit and limit > 0:
        return items[:limit]
    return items


class StaticForumCatalog(ForumCatalog):
    """고정 목록 카탈로그: [(id, title)] 또는 {id: title}"""

    def __init__(self, forums: Union[Mapping[int, str], Iterable[ForumEntry]] = ()):
        pairs = forums.items() if isinstance(forums, Mapping) else forums
        self._forums = sorted(((int(fid), str(title)) for fid, title in pairs), key=lambda x: x[0])

    def list_published_forums(self, limit: Optional[int] = None) -> List[ForumEntry]:
        return _apply_limit(list(self._forums), limit)


class ModelForumCatalog(ForumCatalog):
    """
    ✅ 호스트 포럼 모델 기반 카탈로그
    - 게시(published) 상태만, ID 오름차순
    - 포럼 앱이 설치되지 않았으면 빈 목록 (에러 아님)
    """

    def __init__(self, model_label: str, published_filter: Optional[dict] = None, title_field: str = "title"):
        self.model_label = model_label
        self.published_filter = dict(published_filter or {})
        self.title_field = title_field

    def get_model(self):
        try:
            return apps.get_model(self.model_label)
        except (LookupError, ValueError):
            logger.info("forum model %r is not installed; catalog is empty", self.model_label)
            return None

    def list_published_forums(self, limit: Optional[int] = None) -> List[ForumEntry]:
        model = self.get_model()
        if model is None:
            return []

        qs = (
            model._default_manager
            .filter(**self.published_filter)
            .order_by("pk")
            .values_list("pk", self.title_field)
        )
        if limit and limit > 0:
            qs = qs[:limit]
        return [(pk, title) for pk, title in qs]


# =========================================================
# ✅ Administrator check
# =========================================================
class StaticAdministrators:
    """관리자 ID 고정 집합"""

    def __init__(self, user_ids: Iterable[int] = ()):
        self.user_ids = frozenset(user_ids)

    def __call__(self, user_id: Optional[int]) -> bool:
        return user_id in self.user_ids


class ModelAdministratorCheck:
    """
    ✅ 관리자 판별 (원래 manage_options 권한에 해당)
    - 활성 사용자 + (superuser 또는 permission 보유)
    """

    def __init__(self, permission: str = ""):
        self.permission = permission

    def __call__(self, user_id: Optional[int]) -> bool:
        if not user_id:
            return False
        user = get_user_model()._default_manager.filter(pk=user_id).first()
        return is_manager(user, self.permission)


def is_manager(user, permission: str = "") -> bool:
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    if not getattr(user, "is_active", False):
        return False
    if getattr(user, "is_superuser", False):
        return True
    return bool(permission) and user.has_perm(permission)
