# forum_access/utils/__init__.py

"""
forum_access.utils 패키지

- http    : 통일 JSON 응답
- parsing : 폼 입력 → 정수 ID 정규화 (경계에서 1회만)
"""

from .http import fail, ok
from .parsing import parse_submitted_forum_ids, to_positive_int, to_str

__all__ = [
    "ok",
    "fail",
    "to_str",
    "to_positive_int",
    "parse_submitted_forum_ids",
]
