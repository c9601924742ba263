# forum_access/signals.py
# ===========================================
# 포럼 삭제 시 모든 사용자 연결에서 해당 forum ID 제거
# ===========================================

import logging

from django.db.models.signals import post_delete

from .services import get_forum_access

logger = logging.getLogger(__name__)

DISPATCH_UID = "forum_access.purge_deleted_forum"


def purge_deleted_forum(sender, instance, **kwargs):
    """Forum 삭제 → UserMeta 연결 목록 동기화"""
    forum_id = getattr(instance, "pk", None)
    if not forum_id:
        return

    updated = get_forum_access().purge_forum(forum_id)
    if updated:
        logger.info("forum %s deleted; removed from %s user association(s)", forum_id, updated)


def connect_forum_signals() -> bool:
    """포럼 모델이 설치된 경우에만 연결. 연결했으면 True"""
    catalog = get_forum_access().catalog
    model = catalog.get_model() if catalog is not None else None
    if model is None:
        return False

    post_delete.connect(purge_deleted_forum, sender=model, dispatch_uid=DISPATCH_UID)
    return True
