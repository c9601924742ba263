# forums/constants.py
# =========================================================
# Forums SSOT Constants
# =========================================================

from __future__ import annotations

STATUS_PUBLISH = "publish"
STATUS_DRAFT = "draft"
STATUS_CHOICES = (
    (STATUS_PUBLISH, "Published"),
    (STATUS_DRAFT, "Draft"),
)

FORUM_TITLE_MAX_LEN = 200
