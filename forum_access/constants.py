# forum_access/constants.py
# =========================================================
# Forum Access SSOT Constants
# - settings 미지정 시 사용하는 기본값 모음
# =========================================================

from __future__ import annotations

# =========================================================
# ✅ Storage
# =========================================================
DEFAULT_META_KEY = "forum_associations"

# =========================================================
# ✅ Forum catalog (host board)
# =========================================================
DEFAULT_FORUM_MODEL = "forums.Forum"
DEFAULT_PUBLISHED_FILTER = {"status": "publish"}
DEFAULT_FORUM_TITLE_FIELD = "title"
DEFAULT_FORUM_LIST_LIMIT = 20  # 20개면 충분

# =========================================================
# ✅ Permission
# =========================================================
MANAGE_PERMISSION_CODENAME = "manage_forum_associations"
DEFAULT_ADMIN_PERMISSION = f"forum_access.{MANAGE_PERMISSION_CODENAME}"

# =========================================================
# ✅ Form / UI
# =========================================================
FIELD_NAME = "forum_associations"
MAX_ID_DIGITS = 18  # bigint 범위
FIELDS_TITLE = "Forum Associations"
NO_FORUMS_MESSAGE = "There are currently no published forums with which to associate users."
DEFAULT_DENIED_MESSAGE = ""

# =========================================================
# ✅ URL Names
# =========================================================
USER_ASSOCIATIONS = "forum_access:user_associations"
